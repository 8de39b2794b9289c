"""
Module for data pre-processing, including validation of dissimilarity input
and transformations between different data formats.
"""

import numpy as np
from scipy.spatial.distance import squareform
from .exceptions import (
    InvalidShapeError,
    InvalidDissimilarityError,
    InvalidDissimilarityOrSimilarityError,
)

SYMMETRY_TOLERANCE_FACTOR = 10

def symmetry_tolerance(dtype):
    """
    Tolerance used to compare entries of a dissimilarity or similarity matrix.

    Parameters
    ----------
    dtype : numpy dtype
        Floating point type of the matrix.

    Returns
    -------
    float
        Ten times the machine epsilon of `dtype`.
    """
    return SYMMETRY_TOLERANCE_FACTOR * np.finfo(dtype).eps

def n_samples_from_length(n_pairs):
    """
    Recover the number of samples n from the length of a compact distance
    vector, i.e., solve n * (n-1) / 2 = n_pairs.

    Parameters
    ----------
    n_pairs : int
        Length of the compact distance vector.

    Returns
    -------
    int
        Number of samples.

    Raises
    ------
    InvalidShapeError
        If `n_pairs` is not a triangular number.
    """
    # (1 + sqrt(1 + 8m)) / 2, but robust for large m
    n_samples = int(np.ceil(np.sqrt(2 * n_pairs)))
    if n_pairs == 0:
        n_samples = 1
    if n_samples * (n_samples - 1) // 2 != n_pairs:
        raise InvalidShapeError(
            "A distance vector of length {0} does not correspond to n * (n-1) / 2 pairs for any integer n.".format(n_pairs))
    return n_samples

def vector2matrix(dist_vec):
    """
    Expand a compact distance vector to a full, symmetric distance matrix.

    The vector holds the strict upper triangle in row-major pair order, i.e.,
    (0,1), (0,2), ..., (0,n-1), (1,2), ..., as returned by `scipy.spatial.distance.pdist`.

    Parameters
    ----------
    dist_vec : ndarray of shape (n_samples * (n_samples - 1) / 2,)
        Compact distance vector.

    Returns
    -------
    ndarray of shape (n_samples, n_samples)
        Symmetric distance matrix with zeros on its diagonal.

    Raises
    ------
    InvalidShapeError
        If the input is not one-dimensional or its length is not triangular.
    """
    dist_vec = np.asarray(dist_vec)
    if dist_vec.ndim != 1:
        raise InvalidShapeError("Distance vector must be one-dimensional, got shape {0}.".format(dist_vec.shape))
    n_samples_from_length(len(dist_vec))
    return squareform(dist_vec, checks=False)

def matrix2vector(dist_mat):
    """
    Collapse a square distance matrix to its compact upper-triangle vector.

    Parameters
    ----------
    dist_mat : ndarray of shape (n_samples, n_samples)
        Square distance matrix.

    Returns
    -------
    ndarray of shape (n_samples * (n_samples - 1) / 2,)
        Entries above the diagonal in row-major pair order.

    Raises
    ------
    InvalidShapeError
        If the input is not a square matrix.
    """
    dist_mat = np.asarray(dist_mat)
    if dist_mat.ndim != 2 or dist_mat.shape[0] != dist_mat.shape[1]:
        raise InvalidShapeError("Distance matrix must be square, got shape {0}.".format(dist_mat.shape))
    return dist_mat[np.triu_indices(dist_mat.shape[0], 1)]

def sim2diss(sim_mat, transformation='sqrt'):
    """
    Transform a similarity matrix to a dissimilarity matrix.

    Parameters
    ----------
    sim_mat : ndarray of shape (n_samples, n_samples)
        Matrix of pairwise similarities with ones along the diagonal.
    transformation : str, optional
        Transformation function, either 'sqrt' or 'mirror', by default 'sqrt'.
        'sqrt' - sqrt(1 - similarity), see Seber (1984), eqn. 5.73. Distances
        among the points of a classical scaling solution then equal (or
        approximate) these values.
        'mirror' - 1 - similarity.

    Returns
    -------
    ndarray of shape (n_samples, n_samples)
        Matrix of pairwise dissimilarities.
    """
    sim_mat = np.asarray(sim_mat)
    if sim_mat.ndim != 2 or sim_mat.shape[0] != sim_mat.shape[1]:
        raise InvalidShapeError("Similarity matrix must be square.")

    # Similarities marginally above one (roundoff) map to zero
    diss_mat = np.maximum(1 - sim_mat, 0)
    if transformation == 'sqrt':
        diss_mat = np.sqrt(diss_mat)
    elif transformation != 'mirror':
        raise ValueError(f'Unknown transformation type "{transformation}". Valid options are "sqrt" or "mirror".')

    return diss_mat

def _as_real_array(D):
    D = np.array(D, copy=True)
    if np.iscomplexobj(D):
        raise InvalidDissimilarityError("Dissimilarities must be real-valued.")
    if D.dtype not in (np.float32, np.float64):
        D = D.astype(np.float64)
    return D

def check_dissimilarities(D, verbose=0):
    """
    Validate dissimilarity input and bring it into square matrix form.

    Accepts either a compact distance vector (always read as dissimilarities)
    or a full matrix. A full matrix must be real, non-negative and symmetric
    up to `symmetry_tolerance` relative to its largest entry. Its diagonal
    decides how it is read:

    - all diagonal entries close to 0: dissimilarity matrix, used as is
    - all diagonal entries close to 1 and no entry above 1: similarity matrix,
      transformed via sqrt(1 - D)

    The input itself is never modified.

    Parameters
    ----------
    D : array-like of shape (n_samples, n_samples) or (n_samples * (n_samples - 1) / 2,)
        Dissimilarities or similarities.
    verbose : int, optional
        Verbosity level, by default 0.

    Returns
    -------
    ndarray of shape (n_samples, n_samples)
        Dissimilarity matrix. Integer input is promoted to float64.

    Raises
    ------
    InvalidShapeError
        If `D` is neither a square matrix nor a vector of length n * (n-1) / 2.
    InvalidDissimilarityError
        If `D` contains negative (or missing) entries, or a matrix is not symmetric.
    InvalidDissimilarityOrSimilarityError
        If the diagonal of a matrix is neither (close to) all zeros nor all ones.
    """
    D = _as_real_array(D)

    # A single row is read as a compact vector
    if D.ndim == 2 and D.shape[0] == 1 and D.shape[1] != 1:
        D = D.reshape(-1)

    if D.ndim == 1:
        n_samples_from_length(len(D))
        if not np.all(D >= 0):
            raise InvalidDissimilarityError("Distance vector must only contain non-negative entries.")
        return vector2matrix(D)

    if D.ndim != 2 or D.shape[0] != D.shape[1] or D.shape[0] == 0:
        raise InvalidShapeError(
            "Input must be a square matrix or a distance vector, got shape {0}.".format(D.shape))

    tol = symmetry_tolerance(D.dtype)
    if not np.all(D >= 0):
        raise InvalidDissimilarityError("Dissimilarity matrix must only contain non-negative entries.")
    if not np.all(np.abs(D - D.T) <= tol * np.max(D)):
        raise InvalidDissimilarityError("Dissimilarity matrix must be symmetric.")

    diag = np.diagonal(D)
    if np.all(diag < tol):
        return D

    if np.all(np.abs(diag - 1) < tol) and np.all(D < 1 + tol):
        if verbose > 0:
            print("[CMDS] Similarity matrix detected, transformed to dissimilarities via sqrt(1 - S)")
        return sim2diss(D, transformation='sqrt')

    raise InvalidDissimilarityOrSimilarityError(
        "Matrix has neither a zero diagonal (dissimilarities) nor a unit diagonal "
        "with all entries below one (similarities).")
