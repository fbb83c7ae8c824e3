_HARDWARE_PROPERTIES = {
    "alpha_mhz": {
        "type": "number",
        "description": "Anharmonicity in MHz (typically negative, e.g., -200). This is alpha/2pi.",
    },
    "t1_us": {
        "type": "number",
        "description": "T1 relaxation time in microseconds (e.g., 37).",
    },
    "t2_us": {
        "type": "number",
        "description": "T2 dephasing time in microseconds (e.g., 9.6). Must satisfy T2 <= 2*T1.",
    },
    "gate_time_ns": {
        "type": "number",
        "description": "Gate duration in nanoseconds (e.g., 20).",
    },
}

HARDWARE_FIELDS = ["alpha_mhz", "t1_us", "t2_us", "gate_time_ns"]

TOOL_DESCRIPTIONS = {
    "compute_error_budget": {
        "name": "compute_error_budget",
        "description": (
            "Compute the full error budget for a transmon single-qubit gate, including decoherence floor "
            "(T1/T2 contributions), estimated infidelity for Gaussian/DRAG/GRAPE methods, regime "
            "classification, and calibration recommendation."
        ),
        "parameters": {
            "type": "object",
            "properties": dict(_HARDWARE_PROPERTIES),
            "required": list(HARDWARE_FIELDS),
        },
    },
    "estimate_robustness": {
        "name": "estimate_robustness",
        "description": (
            "Estimate the robustness of Gaussian, DRAG, and GRAPE pulses to detuning (+/-5 MHz) and "
            "amplitude error (+/-5%) for given hardware parameters. Returns minimum fidelity under "
            "each perturbation type."
        ),
        "parameters": {
            "type": "object",
            "properties": dict(_HARDWARE_PROPERTIES),
            "required": list(HARDWARE_FIELDS),
        },
    },
    "save_config": {
        "name": "save_config",
        "description": "Save a hardware configuration for later reference. The user can recall it by name.",
        "parameters": {
            "type": "object",
            "properties": {
                "name": {
                    "type": "string",
                    "description": "A short label for this config (e.g., 'IQM Garnet', 'our device Q3').",
                },
                **_HARDWARE_PROPERTIES,
            },
            "required": ["name"] + HARDWARE_FIELDS,
        },
    },
    "list_configs": {
        "name": "list_configs",
        "description": "List all saved hardware configurations for this session.",
        "parameters": {
            "type": "object",
            "properties": {},
            "required": [],
        },
    },
}
