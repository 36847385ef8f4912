"""Calculator defaults, overridden by repl.py command line flags"""

CALCULATOR_CONFIG = {
    "prompt": "> ",
    "exit_command": "exit",
    "normalize_intermediate": False,  # reduce after every operation instead of keeping raw terms
    "normalize_output": True,  # print results in lowest terms
    "log_level": "WARNING",
}
