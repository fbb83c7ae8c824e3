import json
import logging
from typing import Any, Dict, Tuple, Union

from pulselab.agent.prompts import TOOL_DESCRIPTIONS
from pulselab.agent.store import ConfigStore
from pulselab.error_budget import compute_error_budget, estimate_robustness
from pulselab.formatting import format_error_budget, format_robustness, format_value
from pulselab.schema import HardwareParams, SavedConfig
from pulselab.validation import validate_params

logger = logging.getLogger(__name__)


class ToolArgumentError(ValueError):
    """Raised when tool-call arguments cannot be turned into inputs."""


def parse_arguments(tool_name: str, args: Union[str, Dict[str, Any], None]) -> Dict[str, Any]:
    """
    Decode tool-call arguments (a JSON string or a dict) and check that
    every required argument of the tool is present.
    """
    if args is None:
        args = {}
    if isinstance(args, str):
        try:
            args = json.loads(args) if args.strip() else {}
        except json.JSONDecodeError as e:
            raise ToolArgumentError(f"Arguments for {tool_name} are not valid JSON: {e}")
    if not isinstance(args, dict):
        raise ToolArgumentError(f"Arguments for {tool_name} must be a JSON object.")

    if "alpha_mhz" not in args and "anharmonicity_mhz" in args:
        args = dict(args, alpha_mhz=args["anharmonicity_mhz"])

    required = TOOL_DESCRIPTIONS[tool_name]["parameters"]["required"]
    missing = [key for key in required if key not in args]
    if missing:
        raise ToolArgumentError(f"Missing required argument(s) for {tool_name}: {', '.join(missing)}")
    return args


def _hardware_params(args: Dict[str, Any]) -> HardwareParams:
    try:
        return HardwareParams.from_dict(args)
    except (TypeError, ValueError) as e:
        raise ToolArgumentError(f"Hardware parameters must be numbers: {e}")


def _describe(config: SavedConfig) -> str:
    p = config.params
    return (
        f'"{config.name}": alpha={format_value(p.anharmonicity_mhz)} MHz, T1={format_value(p.t1_us)} us, '
        f"T2={format_value(p.t2_us)} us, T_gate={format_value(p.gate_time_ns)} ns"
    )


def _compute_error_budget(args, store, accept_warnings) -> str:
    params = _hardware_params(args)
    report = validate_params(params)
    if not report.ok or (report.warnings and not accept_warnings):
        return report.render()

    text = format_error_budget(compute_error_budget(params))
    if report.warnings:
        text = report.render() + "\n\n" + text
    return text


def _estimate_robustness(args, store, accept_warnings) -> str:
    params = _hardware_params(args)
    report = validate_params(params)
    if not report.ok:
        return report.render()
    return format_robustness(estimate_robustness(params), params.gate_time_ns)


def _save_config(args, store, accept_warnings) -> str:
    params = _hardware_params(args)
    report = validate_params(params)
    if not report.ok:
        return report.render()
    if not args["name"]:
        raise ToolArgumentError("Configuration name must not be empty.")
    config = store.save(str(args["name"]), params)
    return f"Saved configuration {_describe(config)}"


def _list_configs(args, store, accept_warnings) -> str:
    configs = store.list()
    if not configs:
        return "No saved configurations yet. Use save_config to store hardware parameters."
    return "\n".join(["Saved configurations:"] + [f"  - {_describe(c)}" for c in configs])


_HANDLERS = {
    "compute_error_budget": _compute_error_budget,
    "estimate_robustness": _estimate_robustness,
    "save_config": _save_config,
    "list_configs": _list_configs,
}


def execute_tool(
    tool_name: str,
    args: Union[str, Dict[str, Any], None],
    store: ConfigStore,
    accept_warnings: bool = False,
) -> str:
    """
    Run one tool call and return its text result.

    Args:
        tool_name: One of the keys of TOOL_DESCRIPTIONS.
        args: Tool-call arguments, as a dict or a JSON string.
        store: Configuration store owned by the calling session.
        accept_warnings: Compute the budget even when the parameters raise
                         physical warnings (the warnings are prepended).

    Problems with the request are reported in the returned text; the
    function does not raise for bad arguments or invalid parameters.
    """
    handler = _HANDLERS.get(tool_name)
    if handler is None:
        return f"Unknown tool: {tool_name}"
    try:
        parsed = parse_arguments(tool_name, args)
        return handler(parsed, store, accept_warnings)
    except ToolArgumentError as e:
        logger.info("Rejected %s call: %s", tool_name, e)
        return f"Error: {e}"


def tool_definitions():
    """Tool definitions in the function-calling format used by chat models."""
    return [{"type": "function", "function": t} for t in TOOL_DESCRIPTIONS.values()]


def split_tool_call(tool_call: Dict[str, Any]) -> Tuple[str, Any]:
    """Extract (name, arguments) from a function-calling tool call."""
    function = tool_call.get("function", {})
    return function.get("name", ""), function.get("arguments", {})
