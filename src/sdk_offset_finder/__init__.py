"""SDK offset finder - map byte offsets back to the class fields declared there."""

from .application import InteractiveShell, SdkLoader
from .infrastructure.config import Config
from .main import main

__all__ = ["Config", "InteractiveShell", "SdkLoader", "main"]
