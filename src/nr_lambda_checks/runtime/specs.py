"""Declarative runtime specifications for supported Lambda runtimes.

This is DATA, not code. To add a runtime, add its spec here. Only runtimes
whose handler file naming differs from the generic dotted form need a new
``split_style``.
"""

from dataclasses import dataclass
from typing import Dict, Literal, Optional, Tuple

NODE = "node"
PYTHON = "python"


@dataclass(frozen=True)
class RuntimeSpec:
    """How a runtime's handlers are spelled on disk."""

    language: str
    wrapper_name: str = ""
    file_type: str = ""
    extensions: Tuple[str, ...] = ()  # Candidate extensions, preferred first
    split_style: Literal["node", "generic"] = "generic"


# Unknown runtime: the handler check is skipped entirely
EMPTY_RUNTIME = RuntimeSpec(language="")


RUNTIME_SPECS: Dict[str, RuntimeSpec] = {
    NODE: RuntimeSpec(
        language=NODE,
        wrapper_name="newrelic-lambda-wrapper.handler",
        file_type="js",  # Informational; any of the extensions below will do
        extensions=("js", "cjs", "mjs"),
        split_style="node",
    ),
    PYTHON: RuntimeSpec(
        language=PYTHON,
        wrapper_name="newrelic_lambda_wrapper.handler",
        file_type="py",
        extensions=("py",),
        split_style="generic",
    ),
}

# AWS_EXECUTION_ENV values look like "AWS_Lambda_nodejs20.x"
_EXECUTION_ENV_PREFIXES: Dict[str, str] = {
    "aws_lambda_nodejs": NODE,
    "aws_lambda_python": PYTHON,
}


def get_runtime_spec(language: str) -> RuntimeSpec:
    """Get runtime spec for a language.

    Args:
        language: Language tag (e.g., "node", "python")

    Returns:
        Runtime specification

    Raises:
        ValueError: If language not supported
    """
    if language not in RUNTIME_SPECS:
        supported = ", ".join(RUNTIME_SPECS.keys())
        raise ValueError(
            f"Language '{language}' not supported. "
            f"Supported languages: {supported}"
        )

    return RUNTIME_SPECS[language]


def detect_runtime(execution_env: Optional[str]) -> RuntimeSpec:
    """Map an ``AWS_EXECUTION_ENV`` value to a runtime spec.

    Anything unrecognised (custom runtimes, Java, unset) maps to
    ``EMPTY_RUNTIME`` so the check is skipped.
    """
    value = (execution_env or "").lower()
    for prefix, language in _EXECUTION_ENV_PREFIXES.items():
        if value.startswith(prefix):
            return RUNTIME_SPECS[language]
    return EMPTY_RUNTIME
