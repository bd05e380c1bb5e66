"""
Render targets that receive finished schema documents.
"""

import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, TextIO, Union

from ...shared.exceptions import RenderTargetError


class RenderTarget(ABC):
    """Destination for a generated document."""
    
    @abstractmethod
    def render(self, document: str) -> None:
        """Accept one complete document."""
        pass


class BufferTarget(RenderTarget):
    """Keeps the most recent document in memory."""
    
    def __init__(self):
        self.content: Optional[str] = None
        self.render_count = 0
    
    def render(self, document: str) -> None:
        self.content = document
        self.render_count += 1
    
    def __repr__(self) -> str:
        return "BufferTarget()"


class FileTarget(RenderTarget):
    """Writes the document to a file, replacing previous content."""
    
    def __init__(self, path: Union[str, Path], encoding: str = 'utf-8'):
        self.path = Path(path)
        self.encoding = encoding
    
    def render(self, document: str) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(document + "\n", encoding=self.encoding)
        except OSError as e:
            raise RenderTargetError(f"Cannot write schema to {self.path}: {e}") from e
    
    def __repr__(self) -> str:
        return f"FileTarget({str(self.path)!r})"


class StreamTarget(RenderTarget):
    """Writes the document to a text stream (stdout by default)."""
    
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
    
    def render(self, document: str) -> None:
        stream = self.stream or sys.stdout
        stream.write(document + "\n")
        stream.flush()
    
    def __repr__(self) -> str:
        return "StreamTarget()"
