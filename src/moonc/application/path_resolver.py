"""Mapping of input source paths to output file paths."""

from typing import Optional

OUTPUT_EXTENSION = "lua"
_SEPARATORS = "/\\"


def normalize_target_dir(target_dir: Optional[str]) -> Optional[str]:
    """Return target_dir ending with a path separator, or None when unset."""
    if not target_dir:
        return None
    if target_dir[-1] not in _SEPARATORS:
        return target_dir + "/"
    return target_dir


def swap_extension(input_path: str, extension: str = OUTPUT_EXTENSION) -> str:
    """Replace everything after the last '.' with extension.

    A path without any '.' is returned unchanged.
    """
    pos = input_path.rfind(".")
    if pos == -1:
        return input_path
    return f"{input_path[:pos]}.{extension}"


def resolve_output_path(
    input_path: str,
    explicit_output_file: Optional[str] = None,
    target_dir: Optional[str] = None
) -> str:
    """
    Compute where the compiled output for input_path goes.

    Args:
        input_path: Source file path as given on the command line
        explicit_output_file: Output file requested with -o, wins over everything
        target_dir: Directory requested with -t, already normalized or not

    Returns:
        Output file path
    """
    if explicit_output_file:
        return explicit_output_file

    output_path = swap_extension(input_path)

    target_dir = normalize_target_dir(target_dir)
    if target_dir:
        name = output_path
        pos = max(output_path.rfind("/"), output_path.rfind("\\"))
        if pos != -1:
            name = output_path[pos + 1:]
        output_path = target_dir + name

    return output_path
