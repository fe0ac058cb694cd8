"""Markdown rendering of extracted WWDC records."""

from dataclasses import dataclass

from ..models.records import CodeSample, DocumentItem, DocumentRecord, ResourceLink, VideoRecord


@dataclass(frozen=True)
class MarkdownOutput:
    """Rendered Markdown plus the title used to name the output file."""

    content: str
    title: str


def _render_resource(resource: ResourceLink) -> str:
    return f"- [{resource.title} ({resource.resource_type.label})]({resource.url})\n"


def _render_code_sample(sample: CodeSample) -> str:
    return f"### {sample.title} ({sample.timestamp})\n```{sample.language}\n{sample.code}\n```\n\n"


def _render_item(item: DocumentItem) -> str:
    return f"### {item.item_type} `{item.title}`\n{item.description}\n\n[Documentation]({item.url})\n\n"


def render_video(record: VideoRecord) -> MarkdownOutput:
    """
    Render a session video record.

    Resources, code samples and transcript headings are emitted only when
    the record has content for them.

    Args:
        record: Extracted video record

    Returns:
        MarkdownOutput
    """
    parts = [
        f"# {record.title}\n",
        f"> {record.url}\n\n",
        "## Overview\n",
        f"{record.overview}\n\n",
    ]

    if record.resources:
        parts.append("## Resources\n")
        parts.extend(_render_resource(resource) for resource in record.resources)
        parts.append("\n")

    if record.code_samples:
        parts.append("## Code Samples\n")
        parts.extend(_render_code_sample(sample) for sample in record.code_samples)

    if record.transcript:
        parts.append("## Transcript\n")
        parts.append(f"{record.transcript}\n")

    return MarkdownOutput(content="".join(parts), title=record.title)


def render_document(record: DocumentRecord) -> MarkdownOutput:
    """
    Render a reference document record.

    Args:
        record: Extracted document record

    Returns:
        MarkdownOutput
    """
    parts = [
        f"# {record.title}\n\n",
        f"{record.description}\n\n",
        "## Overview\n",
        f"{record.overview}\n\n",
    ]

    if record.notes:
        parts.append("## Notes\n")
        parts.extend(f"{note}\n\n" for note in record.notes)

    for section in record.sections:
        parts.append(f"## {section.title}\n\n")
        parts.extend(_render_item(item) for item in section.items)

    return MarkdownOutput(content="".join(parts), title=record.title)
