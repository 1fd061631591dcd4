from .filesystem import FilesystemPort, RawEntry
from .opener import OpenerPort

__all__ = ["FilesystemPort", "OpenerPort", "RawEntry"]
