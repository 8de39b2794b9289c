# read version from installed package
from importlib.metadata import version
__version__ = version("cmdscale")

from .mapping import CMDS, cmdscale
from .exceptions import (
    Error,
    InvalidShapeError,
    InvalidDissimilarityError,
    InvalidDissimilarityOrSimilarityError,
    InvalidDimensionRequestError,
    EigenDecompositionError,
)

__all__ = [
    'CMDS', 'cmdscale', 'Error', 'InvalidShapeError', 'InvalidDissimilarityError',
    'InvalidDissimilarityOrSimilarityError', 'InvalidDimensionRequestError',
    'EigenDecompositionError']
