"""
Module for evaluating classical scaling solutions.
"""

import numpy as np
from scipy.spatial.distance import squareform, pdist
from .mapping._cmds import eigenvalue_tolerance
from .preprocessing import check_dissimilarities, matrix2vector

def eigenvalue_dimension(e):
    """
    Number of eigenvalues that are positive beyond roundoff.

    For Euclidean input in general position, this equals the dimension of
    the space the points were drawn from.

    Parameters
    ----------
    e : ndarray of shape (n_eigenvalues,)
        Eigenvalues, as returned by `cmdscale`.

    Returns
    -------
    int
        Number of eigenvalues exceeding max(|e|) * eps^(3/4).
    """
    e = np.asarray(e)
    return int(np.sum(e > eigenvalue_tolerance(e)))

def reconstruction_error(Y, D, n_dims=None):
    """
    Calculate the largest absolute deviation between the input
    dissimilarities and the distances among the map coordinates.

    Parameters
    ----------
    Y : ndarray of shape (n_samples, d)
        Map coordinates.
    D : ndarray of shape (n_samples, n_samples) or (n_samples * (n_samples - 1) / 2,)
        Input dissimilarities (or similarities), in any form accepted by `cmdscale`.
    n_dims : int, optional
        Use only the first `n_dims` coordinates, by default None (all).

    Returns
    -------
    float
        Maximum absolute error, bounded within [0, inf).
        Lower values indicate better reconstruction.

    Raises
    ------
    ValueError
        If the number of samples in Y and D mismatch.
    """
    Y = np.asarray(Y)
    D = check_dissimilarities(D)
    if Y.shape[0] != D.shape[0]:
        raise ValueError("Map and dissimilarities must describe the same number of samples.")
    if n_dims is not None:
        if n_dims < 1 or n_dims > Y.shape[1]:
            raise ValueError("Number of dimensions must be between 1 and {0}.".format(Y.shape[1]))
        Y = Y[:, :n_dims]

    if Y.shape[0] < 2:
        return 0.0
    return float(np.max(np.abs(pdist(Y) - matrix2vector(D))))

def goodness_of_fit(e, n_dims):
    """
    Calculate the share of the leading `n_dims` eigenvalues in the sum of
    absolute eigenvalues (Mardia, Kent & Bibby, 1979, Sec. 14.4).

    Parameters
    ----------
    e : ndarray of shape (n_eigenvalues,)
        Eigenvalues in descending order, as returned by `cmdscale`.
    n_dims : int
        Number of leading dimensions.

    Returns
    -------
    float
        Goodness of fit, bounded within [0, 1] for Euclidean input.
        Higher values indicate a better low-dimensional representation.
    """
    e = np.asarray(e)
    if n_dims < 1 or n_dims > len(e):
        raise ValueError("Number of dimensions must be between 1 and {0}.".format(len(e)))

    total = np.sum(np.abs(e))
    return float(np.sum(e[:n_dims]) / (total if total > 0 else 1))

def hitrate_score(Y, D, n_neighbors=10):
    """
    Calculate the Hitrate of nearest neighbor recovery for a single map. The
    score is averaged across all objects.

    Parameters
    ----------
    Y : ndarray of shape (n_samples, d)
        Map coordinates.
    D : ndarray of shape (n_samples, n_samples) or (n_samples * (n_samples - 1) / 2,)
        Input dissimilarities (or similarities), in any form accepted by `cmdscale`.
    n_neighbors : int, optional
        Number of neighbors considered when calculating the hitrate, by default 10.

    Returns
    -------
    float
        Hitrate of nearest neighbor recovery, bounded within [0,1].
        Higher values indicate better recovery.

    Raises
    ------
    ValueError
        If the input dimensions mismatch or `n_neighbors` is out of range.
    """
    Y = np.asarray(Y)
    D = check_dissimilarities(D)
    n_samples = Y.shape[0]
    if D.shape[0] != n_samples:
        raise ValueError("Map and dissimilarities must describe the same number of samples.")
    if n_neighbors < 1 or n_neighbors > n_samples - 1:
        raise ValueError("Number of neighbors must be between 1 and {0}.".format(n_samples - 1))

    # No point is its own neighbor
    np.fill_diagonal(D, np.inf)
    Dist_map = squareform(pdist(Y, 'sqeuclidean'))
    np.fill_diagonal(Dist_map, np.inf)

    hit_rate = 0
    for i in range(n_samples):
        nearest_original = np.argsort(D[i, :], kind='stable')[:n_neighbors]
        nearest_map = np.argsort(Dist_map[i, :], kind='stable')[:n_neighbors]
        hit_rate += len(np.intersect1d(nearest_original, nearest_map))

    return hit_rate / (n_neighbors * n_samples)
