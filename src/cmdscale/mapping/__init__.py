from ._cmds import CMDS, cmdscale

__all__ = ['CMDS', 'cmdscale']
