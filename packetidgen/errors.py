"""
Error types raised while generating packet ID constants
"""

from typing import Sequence, Union

PathElement = Union[str, int]


def format_path(path: Sequence[PathElement]) -> str:
    """Render a traversal path as ``play.toClient.types.packet[1][0]``"""
    text = ""
    for element in path:
        if isinstance(element, int):
            text += f"[{element}]"
        elif text:
            text += f".{element}"
        else:
            text = element
    return text or "<document>"


class PacketIDGenError(Exception):
    """Base class for all generation failures"""
    pass


class ProtocolDocumentError(PacketIDGenError):
    """The protocol document does not have the expected shape"""

    def __init__(self, message: str, path: Sequence[PathElement] = ()):
        self.path = list(path)
        self.detail = message
        super().__init__(f"{format_path(self.path)}: {message}")


class NotFoundError(ProtocolDocumentError):
    """An expected key or index is absent from the document"""
    pass


class TypeMismatchError(ProtocolDocumentError):
    """A document value is not the container kind the traversal expects"""
    pass


class ParseError(ProtocolDocumentError):
    """A mapping key is not an integer literal, or a name is unusable"""
    pass


class FetchError(PacketIDGenError):
    """The protocol document could not be downloaded or read"""
    pass


class OutputError(PacketIDGenError):
    """The generated module could not be written"""
    pass
