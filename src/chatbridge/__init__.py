"""chatbridge: canonical agent content <-> chat-completion wire messages."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from chatbridge.core.history.assembler import RequestAssembler as RequestAssembler
    from chatbridge.core.interface.client import ChatModel as ChatModel

_LAZY_EXPORTS = {
    "ChatModel": "chatbridge.core.interface.client",
    "RequestAssembler": "chatbridge.core.history.assembler",
}


def __getattr__(name: str) -> object:
    module_path = _LAZY_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'chatbridge' has no attribute {name!r}")
