"""
Stack output helpers.

Writes resolved stack outputs to a dotenv file so the chat front end can be
pointed at the deployed user pool and GraphQL endpoint during local development.
"""

from pathlib import Path
from typing import Any, Mapping

import pulumi


def format_env_lines(values: Mapping[str, Any]) -> list[str]:
    """
    Render output values as KEY=value lines.

    Keys are upper-cased; None values are skipped.
    """
    return [
        f"{key.upper()}={value}"
        for key, value in sorted(values.items())
        if value is not None
    ]


def write_outputs_to_env(
    outputs: Mapping[str, pulumi.Input[Any]],
    filename: str | Path,
) -> pulumi.Output[str]:
    """
    Write stack outputs to a dotenv file once they resolve.

    Args:
        outputs: Mapping of output name to value or pulumi.Output
        filename: Destination file path

    Returns:
        Output resolving to the written file path
    """
    path = Path(filename)

    def _write(values: dict[str, Any]) -> str:
        path.write_text("\n".join(format_env_lines(values)) + "\n", encoding="utf-8")
        pulumi.log.info(f"Wrote {len(values)} stack outputs to {path}")
        return str(path)

    return pulumi.Output.all(**outputs).apply(_write)
