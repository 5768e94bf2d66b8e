"""Canonical and wire data models plus model configuration.

:class:`~chatbridge.core.interface.client.ChatModel` lives in
``chatbridge.core.interface.client`` and is not re-exported here, since it
depends on the translation and history packages.
"""

from chatbridge.core.interface.config import ModelConfig
from chatbridge.core.interface.models import (
    Content,
    ExecutableCode,
    ExecutionResult,
    FileReference,
    FunctionCall,
    FunctionResponse,
    InlineData,
    Part,
    TextPart,
)
from chatbridge.core.interface.wire import (
    FunctionInvocation,
    FunctionSpec,
    Tool,
    ToolCall,
    Usage,
    WireMessage,
)

__all__ = [
    "Content",
    "ExecutableCode",
    "ExecutionResult",
    "FileReference",
    "FunctionCall",
    "FunctionInvocation",
    "FunctionResponse",
    "FunctionSpec",
    "InlineData",
    "ModelConfig",
    "Part",
    "TextPart",
    "Tool",
    "ToolCall",
    "Usage",
    "WireMessage",
]
