"""Page and attachment publishing.

Connects macro generation to the REST client:
- add_attachments: post files as attachment content under an existing page
- upload_attachments: multipart upload through the attachment endpoint
- publish_code_page: create a child page showing a source file in a code macro
"""

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader
from pydantic import BaseModel, Field

from confluence_publisher.client import ConfluenceClient
from confluence_publisher.exceptions import (
    AttachmentReadError,
    ConfluenceError,
    PageNotFoundError,
    UploadError,
)
from confluence_publisher.macro import CodeBlockMacro, Language, Theme
from confluence_publisher.models import (
    Body,
    Content,
    ContentType,
    PageDescriptor,
    Representation,
    Space,
    Storage,
)

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"


class CodeBlockOptions(BaseModel):
    """Macro options collected from the CLI or a caller."""

    language: Language | None = None
    theme: Theme | None = None
    title: str | None = None
    collapse: bool = False
    line_numbers: bool = False
    first_line: int | None = Field(default=None, description="Only used with line_numbers")


def build_code_macro(code: str, options: CodeBlockOptions) -> CodeBlockMacro:
    """Build a code macro for code using the given options."""
    builder = CodeBlockMacro.builder()
    if options.language is not None:
        builder.with_language(options.language)
    if options.theme is not None:
        builder.with_theme(options.theme)
    if options.title is not None:
        builder.with_title(options.title)
    if options.collapse:
        builder.enable_collapse()
    # Line numbers first: firstline is dropped without them
    if options.line_numbers:
        builder.enable_line_numbers()
    if options.first_line is not None:
        builder.with_first_line(options.first_line)
    return builder.with_body(code).build()


def _get_jinja_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(TEMPLATES_DIR),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def build_code_page_body(
    macro: CodeBlockMacro,
    intro: str | None = None,
    source_name: str | None = None,
) -> str:
    """Render the storage format body of a page holding one code macro.

    Args:
        macro: The macro to embed
        intro: Optional paragraph above the code (escaped)
        source_name: Optional file name shown above the code (escaped)

    Returns:
        Storage format markup
    """
    template = _get_jinja_env().get_template("code_page.xml.j2")
    return template.render(  # type: ignore[no-any-return]
        intro=intro,
        source_name=source_name,
        macro_markup=macro.to_markup(),
    )


def find_page(client: ConfluenceClient, page: PageDescriptor) -> Content:
    """Resolve a page by space and title, using the first match.

    Raises:
        PageNotFoundError: If nothing matches
    """
    result = client.get_content_by_space_key_and_title(page.space, page.title)
    parent = result.first
    if parent is None:
        raise PageNotFoundError(page.space, page.title)
    logger.debug("Resolved page %s to id %s", page, parent.id)
    return parent


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise AttachmentReadError(path, f"not UTF-8 text ({e.reason})") from e
    except OSError as e:
        raise AttachmentReadError(path, e.strerror or str(e)) from e


def add_attachments(
    client: ConfluenceClient,
    page: PageDescriptor,
    attachments: list[Path],
) -> list[Content]:
    """Post each file as attachment content under page.

    The file text goes into the storage body of the new content.

    Raises:
        PageNotFoundError: If the page does not exist
        AttachmentReadError: If a file cannot be read
        UploadError: If Confluence rejects an upload
    """
    created = []
    for path in attachments:
        parent = find_page(client, page)
        content = Content(
            type=ContentType.ATTACHMENT,
            space=Space(key=page.space),
            title=page.title,
            ancestors=[parent.as_parent()],
            body=Body(storage=Storage(value=_read_text(path), representation=Representation.STORAGE)),
        )
        try:
            created.append(client.post_content(content))
        except ConfluenceError as e:
            raise UploadError(f"Unable to upload attachment {path}: {e.message}") from e
    return created


def upload_attachments(
    client: ConfluenceClient,
    page: PageDescriptor,
    attachments: list[Path],
    comment: str = "",
) -> list[Content]:
    """Upload files through the multipart attachment endpoint.

    Binary-safe alternative to add_attachments().
    """
    parent_id = find_page(client, page).as_parent().id
    uploaded: list[Content] = []
    for path in attachments:
        try:
            result = client.create_attachment(parent_id, path, comment=comment)
        except ConfluenceError as e:
            raise UploadError(f"Unable to upload attachment {path}: {e.message}") from e
        uploaded.extend(result.results)
    return uploaded


def publish_code_page(
    client: ConfluenceClient,
    parent: PageDescriptor,
    source: Path,
    options: CodeBlockOptions,
    title: str | None = None,
    intro: str | None = None,
) -> Content:
    """Publish source as a new child page of parent.

    The language is guessed from the file suffix when options has none.

    Returns:
        The created page
    """
    code = _read_text(source)

    if options.language is None:
        options = options.model_copy(update={"language": Language.for_path(source)})

    macro = build_code_macro(code, options)
    parent_page = find_page(client, parent)
    content = Content(
        type=ContentType.PAGE,
        space=Space(key=parent.space),
        title=title or source.name,
        ancestors=[parent_page.as_parent()],
        body=Body(storage=Storage(value=build_code_page_body(macro, intro=intro, source_name=source.name))),
    )
    try:
        return client.post_content(content)
    except ConfluenceError as e:
        raise UploadError(f"Unable to publish {source}: {e.message}") from e
