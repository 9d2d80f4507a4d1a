"""
Documentation generator for autoincrement commands.

AI agent-optimized documentation with the concurrency semantics,
guarantees, and failure modes of each command.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import sys


def _bullets(title: str, entries: list[str], fmt: str = "- **{}**\n") -> str:
    if not entries:
        return ""
    section = f"## {title}\n"
    for entry in entries:
        section += fmt.format(entry)
    return section + "\n"


def _fields(title: str, fields: dict[str, str]) -> str:
    if not fields:
        return ""
    section = f"{title}\n"
    for key, value in fields.items():
        section += f"- **{key}**: {value}\n"
    return section + "\n"


def _code_blocks(title: str, label: str, blocks: list[dict[str, str]]) -> str:
    if not blocks:
        return ""
    section = f"## {title}\n\n"
    for idx, block in enumerate(blocks, 1):
        section += f"### {label} {idx}: {block['title']}\n"
        section += "```bash\n"
        section += block["code"]
        section += "\n```\n"
        if "note" in block:
            section += f"_{block['note']}_\n"
        section += "\n"
    return section


def generate_doc(
    name: str,
    synopsis: str,
    description: str,
    properties: dict[str, str],
    guarantees: list[str],
    when_to_apply: list[str],
    examples: list[dict[str, str]],
    failure_modes: list[str],
    see_also: list[str],
) -> str:
    """
    Generate AI agent-optimized documentation in markdown format.

    Args:
        name: Command name and brief description
        synopsis: Command syntax
        description: Detailed description of the protocol
        properties: Concurrency and consistency properties
        guarantees: List of guarantees (atomicity, ordering, etc.)
        when_to_apply: List of use cases
        examples: List of practical examples with title and code
        failure_modes: List of possible failures
        see_also: Related commands

    Returns:
        Markdown-formatted documentation string
    """
    doc = f"# {name}\n\n"
    doc += f"## SYNOPSIS\n```bash\n{synopsis}\n```\n\n"
    doc += f"## DESCRIPTION\n{description}\n\n"
    doc += _fields("### Properties", properties)
    doc += _bullets("GUARANTEES", guarantees)
    doc += _bullets("WHEN TO APPLY", when_to_apply)
    doc += _code_blocks("PRACTICAL EXAMPLES", "Example", examples)
    doc += _bullets("FAILURE MODES", failure_modes, "- `{}`\n")
    if see_also:
        doc += "## SEE ALSO\n" + ", ".join(see_also) + "\n"
    return doc


def display_doc(doc_content: str) -> None:
    """
    Print documentation and exit.

    Args:
        doc_content: Markdown documentation content
    """
    # For AI agents, direct print is better than pager
    print(doc_content, file=sys.stderr)
    sys.exit(0)
