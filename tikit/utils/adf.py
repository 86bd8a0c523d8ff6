"""Utilities for handling Atlassian Document Format (ADF)."""


def extract_text_from_adf(adf_data) -> str:
    """Extract plain text from an Atlassian Document Format (ADF) structure.

    Text nodes are joined per block: each paragraph, heading or list item
    becomes one line. Anything that is not an ADF document is returned as
    its string representation.
    """
    if not isinstance(adf_data, dict) or not isinstance(adf_data.get("content"), list):
        return str(adf_data)

    lines = []

    def extract_text(node, parts):
        if isinstance(node, dict):
            if node.get("type") == "text" and "text" in node:
                parts.append(str(node["text"]))
            elif node.get("type") == "hardBreak":
                parts.append("\n")
            elif isinstance(node.get("content"), list):
                for child in node["content"]:
                    extract_text(child, parts)
        elif isinstance(node, list):
            for item in node:
                extract_text(item, parts)

    for block in adf_data["content"]:
        parts: list = []
        extract_text(block, parts)
        if parts:
            lines.append("".join(parts))

    return "\n".join(lines)
