"""
Classical (eigendecomposition-based) Multidimensional Scaling, as proposed in:

Torgerson, W.S. Multidimensional scaling: I. Theory and method. Psychometrika 17, 401–419 (1952).

Seber, G.A.F. Multivariate Observations. Wiley (1984).
"""

import inspect
import numbers
import numpy as np
from numba import jit
from scipy.sparse.linalg import eigsh, ArpackError
from scipy.spatial.distance import pdist
from ..exceptions import EigenDecompositionError, InvalidDimensionRequestError
from ..preprocessing import check_dissimilarities

EIGENVALUE_TOLERANCE_EXPONENT = 0.75

def eigenvalue_tolerance(e):
    """Threshold below which an eigenvalue counts as zero (or negative) due to
    roundoff: max(|e|) * eps^(3/4) for the floating point type of `e`.

    Parameters
    ----------
    e : ndarray of shape (n_eigenvalues,)
        Eigenvalues.

    Returns
    -------
    float
        The threshold.
    """
    e = np.asarray(e)
    if e.size == 0:
        return 0.0
    dtype = e.dtype if np.issubdtype(e.dtype, np.floating) else np.float64
    return np.max(np.abs(e)) * np.finfo(dtype).eps ** EIGENVALUE_TOLERANCE_EXPONENT

def cmdscale(D, n_dims=None, random_state=0, verbose=0):
    """Perform classical multidimensional scaling (CMDS) on dissimilarities.

    The squared dissimilarities are double-centered and the resulting matrix
    B is eigendecomposed. Coordinates are the eigenvectors of the positive
    eigenvalues, scaled by the square roots of these eigenvalues. When D is a
    Euclidean distance matrix, the distances among the rows of Y equal D.

    Parameters
    ----------
    D : array-like of shape (n, n) or (n * (n-1) / 2,)
        Dissimilarity matrix, similarity matrix (unit diagonal, all entries
        below one) or compact distance vector as returned by `pdist`.
    n_dims : int, optional
        Number of eigenpairs to compute, between 1 and n. If smaller than n,
        only the top `n_dims` eigenpairs are computed by a truncated solver.
        By default None, which computes all n eigenpairs.
    random_state : int or np.random.RandomState, optional
        Seed of the start vector for the truncated solver, by default 0.
    verbose : int, optional
        Verbosity level, by default 0.

    Returns
    -------
    Y : np.array of shape (n, d)
        Configuration matrix. d <= n_dims is the number of eigenvalues
        exceeding `eigenvalue_tolerance`. If no eigenvalue does, Y is an
        (n, 1) matrix of zeros.
    e : np.array of shape (n_dims,)
        The computed eigenvalues of B, in descending order.

    Raises
    ------
    InvalidShapeError, InvalidDissimilarityError, InvalidDissimilarityOrSimilarityError
        If `D` is not a valid dissimilarity or similarity input.
    InvalidDimensionRequestError
        If `n_dims` is not an integer between 1 and n.
    EigenDecompositionError
        If the eigensolver fails.
    """
    D = check_dissimilarities(D, verbose=verbose)
    n = D.shape[0]
    p = _check_n_dims(n_dims, n)

    B = _double_center(D)
    V, E = _decompose(B, p, random_state=random_state, verbose=verbose)

    order, e, keep = _select_dimensions(E)
    V = V[:, order]
    if verbose > 0:
        print("[CMDS] Retained {0} of {1} eigenvalues".format(len(keep), len(e)))

    Y = _build_coordinates(V, e, keep, n)
    Y = _enforce_signs(Y)
    return Y, e

def _check_n_dims(n_dims, n):
    """Validate the requested number of dimensions, defaulting to n."""
    if n_dims is None:
        return n
    if isinstance(n_dims, (bool, np.bool_)):
        raise InvalidDimensionRequestError("Number of dimensions must be an integer, not a boolean.")
    if isinstance(n_dims, numbers.Integral):
        p = int(n_dims)
    elif isinstance(n_dims, numbers.Real) and float(n_dims).is_integer():
        p = int(n_dims)
    else:
        raise InvalidDimensionRequestError(
            "Number of dimensions must be an integer between 1 and {0}, got {1!r}.".format(n, n_dims))
    if p < 1 or p > n:
        raise InvalidDimensionRequestError(
            "Number of dimensions must be an integer between 1 and {0}, got {1}.".format(n, p))
    return p

@jit(nopython=True)
def _double_center(D):
    """Build B = -1/2 * P D^2 P with P = I - 1/n * 11', without forming P.

    Parameters
    ----------
    D : np.array of shape (n, n)
        Dissimilarity matrix.

    Returns
    -------
    np.array of shape (n, n)
        Double-centered matrix of squared dissimilarities.
    """
    n = D.shape[0]
    D_sq = D * D
    row_sums = np.zeros(n)   # sum over columns j, one per row i
    col_sums = np.zeros(n)   # sum over rows i, one per column j
    total = 0.0
    for i in range(n):
        for j in range(n):
            row_sums[i] += D_sq[i, j]
            col_sums[j] += D_sq[i, j]
            total += D_sq[i, j]

    grand_mean = total / (n * n)
    B = np.empty_like(D_sq)
    for i in range(n):
        for j in range(n):
            B[i, j] = -0.5 * (D_sq[i, j] - row_sums[i] / n - col_sums[j] / n + grand_mean)
    return B

def _decompose(B, n_dims, random_state=0, verbose=0):
    """Eigendecompose the symmetric matrix B, fully or truncated to the top
    `n_dims` eigenpairs (largest algebraic eigenvalues).

    Returns
    -------
    V : np.array of shape (n, n_dims)
        Eigenvectors, as columns.
    E : np.array of shape (n_dims,)
        Eigenvalues, in the solver's order.
    """
    n = B.shape[0]
    # guard against spurious complex eigenvalues from roundoff
    B = (B + B.T) / 2
    try:
        if n_dims == n:
            if verbose > 0:
                print("[CMDS] Full eigendecomposition (n={0})".format(n))
            E, V = np.linalg.eigh(B)
        elif not np.any(B):
            # ARPACK cannot start on the zero matrix; every eigenvalue is zero
            if verbose > 0:
                print("[CMDS] Zero matrix, all eigenvalues are zero")
            E, V = np.zeros(n_dims, dtype=B.dtype), np.eye(n, n_dims, dtype=B.dtype)
        else:
            if verbose > 0:
                print("[CMDS] Truncated eigendecomposition ({0} of n={1} eigenpairs)".format(n_dims, n))
            rng = random_state if isinstance(random_state, np.random.RandomState) \
                else np.random.RandomState(random_state)
            v0 = rng.uniform(-1, 1, n).astype(B.dtype)
            E, V = eigsh(B, k=n_dims, which='LA', v0=v0)
    except (np.linalg.LinAlgError, ArpackError) as err:
        raise EigenDecompositionError("Eigendecomposition failed: {0}".format(err)) from err

    return np.real(V), np.real(E)

def _select_dimensions(E):
    """Sort eigenvalues in descending order and find those exceeding roundoff.

    Returns
    -------
    order : np.array of shape (n_dims,)
        Permutation sorting `E` in descending order.
    e : np.array of shape (n_dims,)
        Sorted eigenvalues.
    keep : np.array of shape (d,)
        Positions (within `e`) of the retained eigenvalues.
    """
    # equal eigenvalues keep the solver's order
    order = np.argsort(-E, kind='stable')
    e = E[order]
    keep = np.flatnonzero(e > eigenvalue_tolerance(e))
    return order, e, keep

def _build_coordinates(V, e, keep, n):
    """Scale the retained eigenvectors by the square roots of their eigenvalues."""
    if len(keep) == 0:
        return np.zeros((n, 1), dtype=V.dtype)
    return V[:, keep] * np.sqrt(e[keep])

def _enforce_signs(Y):
    """Flip each column such that its largest absolute entry is positive.

    Ties go to the lowest row index. All-zero columns are left unchanged.
    """
    max_idx = np.argmax(np.abs(Y), axis=0)
    signs = np.sign(Y[max_idx, np.arange(Y.shape[1])])
    signs[signs == 0] = 1
    return Y * signs

class CMDS():

    def __init__(
        self,
        n_dims = None,
        input_type = 'distance',
        random_state = 0,
        verbose = 0
    ):

        self.n_dims = n_dims
        self.input_type = input_type
        self.random_state = random_state
        self.verbose = verbose
        self.method_str = "CMDS"

    def __str__(self):
        """Create a string representation of the CMDS instance, including all
        parameters modified by the user."""
        result = f"CMDS(n_dims={self.n_dims}"

        signature = inspect.signature(self.__init__)
        defaults = {k: v.default for k, v in signature.parameters.items() if v.default is not inspect.Parameter.empty}

        changed_attrs = []
        for attr, default_val in defaults.items():
            current_val = getattr(self, attr)
            if current_val != default_val and attr != "n_dims":
                changed_attrs.append(f"{attr}={current_val}")

        if changed_attrs:
            result += ", " + ", ".join(changed_attrs)

        result += ")"
        return result

    def fit(self, X):
        """Fit the CMDS model to the provided input data.

        Parameters
        ----------
        X : np.array of shape (n, n), (n * (n-1) / 2,) or (n, n_features)
            The input data. If `input_type` is 'distance', X is a dissimilarity
            (or similarity) matrix or a compact distance vector. If `input_type`
            is 'vector', X holds the feature vectors of the samples.

        Returns
        -------
        self : object
            Returns the instance itself with the configuration matrix `Y_`, the
            eigenvalues `eigenvalues_` and the number of retained dimensions
            `n_dims_` stored as attributes.

        Raises
        ------
        ValueError
            If `input_type` is neither 'distance' nor 'vector'.
        """
        if self.input_type == 'distance':
            D = X
        elif self.input_type == 'vector':
            D = pdist(np.asarray(X, dtype=float))
        else:
            raise ValueError("Input type should be 'distance' or 'vector', not {0}".format(self.input_type))

        Y, e = cmdscale(D, self.n_dims, random_state=self.random_state, verbose=self.verbose)

        self.Y_ = Y
        self.eigenvalues_ = e
        self.n_dims_ = int(np.sum(e > eigenvalue_tolerance(e)))
        return self

    def fit_transform(self, X):
        """Fit the CMDS model to the input data and return the transformed coordinates.

        Parameters
        ----------
        X : np.array of shape (n, n), (n * (n-1) / 2,) or (n, n_features)
            The input data, see `fit`.

        Returns
        -------
        np.array of shape (n, d)
            The configuration matrix; d is the number of positive eigenvalues
            among the computed ones.
        """
        self.fit(X)
        return self.Y_
