from .tools import execute_tool, tool_definitions, split_tool_call, ToolArgumentError
from .store import ConfigStore
from .prompts import TOOL_DESCRIPTIONS
