"""
Exceptions raised while validating input and computing embeddings.
"""

class Error(Exception):
    """Base class for other exceptions"""
    pass

class InvalidShapeError(Error, ValueError):
    """Raised when the input is neither a square matrix nor a vector of
    triangular length n * (n-1) / 2"""
    pass

class InvalidDissimilarityError(Error, ValueError):
    """Raised when the input contains negative entries or a matrix is not
    (numerically) symmetric"""
    pass

class InvalidDissimilarityOrSimilarityError(Error, ValueError):
    """Raised when the diagonal of a matrix matches neither a dissimilarity
    (zeros) nor a similarity (ones) matrix"""
    pass

class InvalidDimensionRequestError(Error, ValueError):
    """Raised when the requested number of dimensions is not an integer
    between 1 and n"""
    pass

class EigenDecompositionError(Error, ArithmeticError):
    """Raised when the eigensolver fails to converge"""
    pass
