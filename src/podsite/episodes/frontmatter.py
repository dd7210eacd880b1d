"""Front matter extraction and decoding for episode documents.

A document looks like::

    ---
    title: Pilot
    date: 2024-03-01T12:00:00+00:00
    ...
    ---
    Body text.

The closing delimiter is the first ``---`` at or after offset 4, so a ``---``
inside a metadata value ends the block early.
"""

import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from podsite.episodes.models import Episode
from podsite.utils.errors import MalformedDocumentError, MetadataParseError

DELIMITER = "---"
OPENING = DELIMITER + "\n"

# The metadata region starts on the second line of the document
_FIRST_METADATA_LINE = 2

_STRING_ONLY_TAGS = (
    "tag:yaml.org,2002:bool",
    "tag:yaml.org,2002:float",
    "tag:yaml.org,2002:int",
    "tag:yaml.org,2002:timestamp",
)


class FrontMatterLoader(yaml.SafeLoader):
    """SafeLoader that reads plain scalars the YAML 1.2 way.

    Numbers, timestamps and words like ``yes``/``off`` stay text exactly as
    written, so ``length: 0755`` or ``duration: 1:02:03`` reach the Episode
    model unchanged. Only ``null`` and ``true``/``false`` are resolved.
    """


FrontMatterLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _STRING_ONLY_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
FrontMatterLoader.add_implicit_resolver(
    "tag:yaml.org,2002:bool",
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def split_front_matter(content: str, path: Path) -> tuple[str, str]:
    """Split a document into its front matter and body.

    Args:
        content: Full document text
        path: Document path, used in error messages

    Returns:
        Tuple of (metadata text, body text)

    Raises:
        MalformedDocumentError: If either delimiter is missing
    """
    if not content.startswith(OPENING):
        raise MalformedDocumentError(
            f"File does not start with '{DELIMITER}': {path}", path
        )

    index = content.find(DELIMITER, len(OPENING))
    if index == -1:
        raise MalformedDocumentError(
            f"File does not contain the second '{DELIMITER}', "
            f"the end of the front matter: {path}",
            path,
        )

    return content[len(OPENING) : index], content[index + len(OPENING) :]


def parse_front_matter(metadata: str, path: Path) -> Episode:
    """Decode a front matter block into an Episode.

    Args:
        metadata: Text between the two delimiters
        path: Document path, used in error messages

    Returns:
        Episode without ``path`` or ``body`` set

    Raises:
        MetadataParseError: If the YAML is invalid or does not fit the schema
    """
    try:
        data = yaml.load(metadata, Loader=FrontMatterLoader)
    except yaml.YAMLError as e:
        raise MetadataParseError(
            f"Failed to parse front matter: {_describe_yaml_error(e)} in {path}", path
        ) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise MetadataParseError(
            f"Failed to parse front matter: expected a mapping, "
            f"got {type(data).__name__} in {path}",
            path,
        )

    try:
        return Episode.model_validate(_without_loader_fields(data))
    except ValidationError as e:
        lines = _key_lines(metadata)
        problems = "; ".join(_describe_field_error(err, lines) for err in e.errors())
        raise MetadataParseError(
            f"Failed to parse front matter: {problems} in {path}", path
        ) from e


def _without_loader_fields(data: dict[Any, Any]) -> dict[Any, Any]:
    # path and body never come from the document itself
    return {key: value for key, value in data.items() if key not in ("path", "body")}


def _describe_yaml_error(error: yaml.YAMLError) -> str:
    if isinstance(error, yaml.MarkedYAMLError) and error.problem_mark is not None:
        mark = error.problem_mark
        line = mark.line + _FIRST_METADATA_LINE
        return f"{error.problem or error.context} at line {line} column {mark.column + 1}"
    return str(error)


def _key_lines(metadata: str) -> dict[str, int]:
    """Map top-level keys to their line number in the document."""
    try:
        node = yaml.compose(metadata, Loader=FrontMatterLoader)
    except yaml.YAMLError:
        return {}
    if not isinstance(node, yaml.MappingNode):
        return {}

    lines = {}
    for key_node, _ in node.value:
        if isinstance(key_node, yaml.ScalarNode):
            lines.setdefault(key_node.value, key_node.start_mark.line + _FIRST_METADATA_LINE)
    return lines


def _describe_field_error(error: dict[str, Any], lines: dict[str, int]) -> str:
    field = ".".join(str(part) for part in error["loc"]) or "front matter"
    message = f"{field}: {error['msg']}"
    top_level = str(error["loc"][0]) if error["loc"] else None
    if top_level in lines:
        message += f" at line {lines[top_level]}"
    return message
