"""Prompt template for LaTeX to Word-compatible HTML conversion."""

from __future__ import annotations

from latex2doc.converter.models import ConversionOptions

PREAMBLE = """\
You are a world-class document conversion engine. Your task is to convert the provided LaTeX source code into a single, self-contained HTML file that Microsoft Word can open and interpret accurately.\
"""

STRUCTURE_DIRECTIVE = """\
1.  **Structure & Formatting:** Preserve the original document structure, including sections, subsections, titles, authors, abstracts, lists, and emphasis (bold, italics).\
"""

TABLES_DIRECTIVE = """\
2.  **Tables:** Convert LaTeX tables (`tabular`, `table` environments) into well-formed HTML tables (`<table>`, `<tr>`, `<td>`, `<th>`). Retain captions (`\\caption`). Use CSS for borders and alignment.\
"""

FIGURE_PLACEHOLDER_DIRECTIVE = """\
3.  **Figures:** The user has provided only the LaTeX text. Where `\\includegraphics` is used, you cannot access the file. Instead, create a styled placeholder `<div>` with the specified image path as text content and a clear border. Include the figure caption (`\\caption`). The placeholder should be visually distinct (e.g., a dashed gray border and a message like "Image placeholder: [path]").\
"""

FIGURE_OMIT_DIRECTIVE = """\
3.  **Figures:** The user has opted out of image placeholders. Completely ignore any `\\includegraphics` commands.\
"""

MATH_DIRECTIVE = """\
4.  **Mathematics:** Convert mathematical equations (both inline `$...$` and display `$$...$$` or `equation` environments) into MathML for maximum compatibility with modern word processors. If MathML is not possible, use Unicode characters for simple expressions.\
"""

CITATIONS_DIRECTIVE = """\
5.  **Citations & References:** Format citations (e.g., `\\cite{...}`) and bibliographies (`thebibliography`) as plain text within the document flow.\
"""

STYLING_DIRECTIVE = """\
6.  **Styling:** Use inline CSS within a `<style>` tag in the HTML `<head>`. The style should be professional and academic (e.g., Times New Roman or similar serif font, appropriate margins, font sizes for headings). The goal is to make the HTML look as close as possible to a compiled PDF from the LaTeX source.\
"""

OUTPUT_DIRECTIVE = """\
7.  **Output Format:** Your entire response MUST be ONLY the raw HTML code. Do not wrap it in markdown backticks (```html ... ```) or provide any conversational text before or after the HTML. The output must start with `<!DOCTYPE html>` or just the `<html>` tag and end with `</html>`.\
"""

PRIORITIES_HEADING = "**User-Defined Priorities:**"

STRICT_FORMATTING_DIRECTIVE = (
    "- **Strict Formatting:** Prioritize preserving the exact visual layout and "
    "spacing as much as HTML allows. This is a high priority."
)

MATH_PRIORITY_DIRECTIVE = (
    "- **Math Priority:** Ensure mathematical equations are converted to MathML "
    "with the highest possible accuracy, even if it compromises some minor text "
    "formatting."
)

SOURCE_DELIMITER = "---"


def _figure_directive(options: ConversionOptions) -> str:
    if options.no_image_placeholders:
        return FIGURE_OMIT_DIRECTIVE
    return FIGURE_PLACEHOLDER_DIRECTIVE


def _priorities_block(options: ConversionOptions) -> str:
    """Return the priorities section, or an empty string when nothing is enabled."""
    lines: list[str] = []
    if options.strict_formatting:
        lines.append(STRICT_FORMATTING_DIRECTIVE)
    if options.math_priority:
        lines.append(MATH_PRIORITY_DIRECTIVE)
    if not lines:
        return ""
    return "\n".join([PRIORITIES_HEADING, *lines])


def build_conversion_prompt(source: str, options: ConversionOptions) -> str:
    """Build the instruction prompt for converting ``source``.

    The result is a pure function of its arguments. The source text is
    embedded verbatim between ``---`` delimiter lines.
    """
    directives = "\n".join([
        STRUCTURE_DIRECTIVE,
        TABLES_DIRECTIVE,
        _figure_directive(options),
        MATH_DIRECTIVE,
        CITATIONS_DIRECTIVE,
        STYLING_DIRECTIVE,
        OUTPUT_DIRECTIVE,
    ])
    sections = [PREAMBLE, "**Conversion Requirements:**", directives]

    priorities = _priorities_block(options)
    if priorities:
        sections.append(priorities)

    sections.append(
        "Here is the LaTeX code to convert:\n"
        f"{SOURCE_DELIMITER}\n{source}\n{SOURCE_DELIMITER}"
    )
    return "\n\n".join(sections) + "\n"
