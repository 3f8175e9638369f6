"""Tests for page and attachment publishing."""

from pathlib import Path

import pytest

from confluence_publisher.client import ConfluenceClient
from confluence_publisher.exceptions import (
    AttachmentReadError,
    PageNotFoundError,
    UploadError,
)
from confluence_publisher.macro import Language, MacroParameter, Theme
from confluence_publisher.models import ContentType, PageDescriptor
from confluence_publisher.publish import (
    CodeBlockOptions,
    add_attachments,
    build_code_macro,
    build_code_page_body,
    find_page,
    publish_code_page,
    upload_attachments,
)
from fakes import FakeConfluence

HOME = PageDescriptor(space="DOC", title="Home")


class TestBuildCodeMacro:
    """Tests for building macros from options."""

    def test_all_options(self) -> None:
        options = CodeBlockOptions(
            language=Language.SCALA,
            theme=Theme.EMACS,
            title="Demo",
            collapse=True,
            line_numbers=True,
            first_line=10,
        )

        macro = build_code_macro("object A", options)

        assert dict(macro.parameters) == {
            MacroParameter.COLLAPSE: "true",
            MacroParameter.FIRSTLINE: "10",
            MacroParameter.LANGUAGE: "scala",
            MacroParameter.LINENUMBERS: "true",
            MacroParameter.THEME: "Emacs",
            MacroParameter.TITLE: "Demo",
        }

    def test_first_line_without_line_numbers(self) -> None:
        macro = build_code_macro("x", CodeBlockOptions(first_line=4))

        assert MacroParameter.FIRSTLINE not in macro.parameters

    def test_no_options(self) -> None:
        macro = build_code_macro("x", CodeBlockOptions())

        assert dict(macro.parameters) == {}
        assert macro.body == "<![CDATA[x]]>"


class TestBuildCodePageBody:
    """Tests for page body rendering."""

    def test_body_is_macro_markup(self) -> None:
        macro = build_code_macro("print(1)", CodeBlockOptions(language=Language.PYTHON))

        assert build_code_page_body(macro) == macro.to_markup()

    def test_intro_and_source_are_escaped(self) -> None:
        macro = build_code_macro("a < b", CodeBlockOptions())

        body = build_code_page_body(macro, intro="Fish & chips", source_name="<main>.py")

        assert body.startswith("<p>Fish &amp; chips</p><p><em>&lt;main&gt;.py</em></p>")
        assert body.endswith(macro.to_markup())
        assert "<![CDATA[a < b]]>" in body


class TestFindPage:
    """Tests for parent page resolution."""

    def test_first_match(self, client: ConfluenceClient) -> None:
        page = find_page(client, HOME)

        assert page.id == "1000"

    def test_uses_first_of_several(
        self, client: ConfluenceClient, fake_confluence: FakeConfluence
    ) -> None:
        fake_confluence.add_page("DOC", "Home")

        assert find_page(client, HOME).id == "1000"

    def test_missing_page(self, client: ConfluenceClient) -> None:
        with pytest.raises(PageNotFoundError, match="Nowhere"):
            find_page(client, PageDescriptor(space="DOC", title="Nowhere"))


class TestAddAttachments:
    """Tests for posting attachments as content."""

    def test_posts_one_content_per_file(
        self, client: ConfluenceClient, fake_confluence: FakeConfluence, tmp_path: Path
    ) -> None:
        first = tmp_path / "notes.txt"
        first.write_text("release notes")
        second = tmp_path / "changes.txt"
        second.write_text("changelog")

        created = add_attachments(client, HOME, [first, second])

        assert len(created) == 2
        posted = fake_confluence.posted()
        assert [p["body"]["storage"]["value"] for p in posted] == ["release notes", "changelog"]
        for payload in posted:
            assert payload["type"] == "attachment"
            assert payload["title"] == "Home"
            assert payload["space"] == {"key": "DOC"}
            assert payload["ancestors"] == [{"id": "1000"}]
            assert payload["body"]["storage"]["representation"] == "storage"

    def test_missing_parent(self, client: ConfluenceClient, tmp_path: Path) -> None:
        path = tmp_path / "a.txt"
        path.write_text("a")

        with pytest.raises(PageNotFoundError):
            add_attachments(client, PageDescriptor(space="DOC", title="Gone"), [path])

    def test_unreadable_file(self, client: ConfluenceClient, tmp_path: Path) -> None:
        with pytest.raises(AttachmentReadError):
            add_attachments(client, HOME, [tmp_path / "missing.txt"])

    def test_binary_file(self, client: ConfluenceClient, tmp_path: Path) -> None:
        path = tmp_path / "image.png"
        path.write_bytes(b"\x89PNG\xff\xfe")

        with pytest.raises(AttachmentReadError, match="not UTF-8"):
            add_attachments(client, HOME, [path])

    def test_rejected_upload(
        self, client: ConfluenceClient, fake_confluence: FakeConfluence, tmp_path: Path
    ) -> None:
        path = tmp_path / "a.txt"
        path.write_text("a")
        fake_confluence.fail_posts_with = 500

        with pytest.raises(UploadError, match="Unable to upload attachment"):
            add_attachments(client, HOME, [path])


class TestUploadAttachments:
    """Tests for multipart uploads."""

    def test_uploads_each_file(
        self, client: ConfluenceClient, fake_confluence: FakeConfluence, tmp_path: Path
    ) -> None:
        paths = []
        for name in ("a.bin", "b.bin"):
            path = tmp_path / name
            path.write_bytes(b"\x00\x01")
            paths.append(path)

        uploaded = upload_attachments(client, HOME, paths, comment="build 42")

        assert [c.title for c in uploaded] == ["a.bin", "b.bin"]
        assert all(c.type == ContentType.ATTACHMENT for c in uploaded)
        attachment_requests = [
            r for r in fake_confluence.requests if r.url.path.endswith("/child/attachment")
        ]
        assert len(attachment_requests) == 2
        assert all(r.url.path == "/rest/api/content/1000/child/attachment" for r in attachment_requests)

    def test_rejected_upload(
        self, client: ConfluenceClient, fake_confluence: FakeConfluence, tmp_path: Path
    ) -> None:
        path = tmp_path / "a.bin"
        path.write_bytes(b"\x00")
        fake_confluence.fail_posts_with = 413

        with pytest.raises(UploadError, match="413"):
            upload_attachments(client, HOME, [path])


class TestPublishCodePage:
    """Tests for publishing a source file as a page."""

    def test_publishes_child_page(
        self, client: ConfluenceClient, fake_confluence: FakeConfluence, tmp_path: Path
    ) -> None:
        source = tmp_path / "Main.java"
        source.write_text("class Main {}")

        page = publish_code_page(
            client, HOME, source, CodeBlockOptions(line_numbers=True, first_line=1)
        )

        assert page.id is not None
        assert page.title == "Main.java"
        payload = fake_confluence.posted()[-1]
        assert payload["type"] == "page"
        assert payload["ancestors"] == [{"id": "1000"}]
        body = payload["body"]["storage"]["value"]
        assert '<ac:parameter ac:name="language">java</ac:parameter>' in body
        assert '<ac:parameter ac:name="firstline">1</ac:parameter>' in body
        assert "<![CDATA[class Main {}]]>" in body

    def test_explicit_language_and_title(
        self, client: ConfluenceClient, fake_confluence: FakeConfluence, tmp_path: Path
    ) -> None:
        source = tmp_path / "build.gradle"
        source.write_text("apply plugin: 'java'")

        page = publish_code_page(
            client,
            HOME,
            source,
            CodeBlockOptions(language=Language.NONE),
            title="Build script",
            intro="Current build",
        )

        assert page.title == "Build script"
        body = fake_confluence.posted()[-1]["body"]["storage"]["value"]
        assert body.startswith("<p>Current build</p>")
        assert '<ac:parameter ac:name="language">none</ac:parameter>' in body

    def test_missing_parent(self, client: ConfluenceClient, tmp_path: Path) -> None:
        source = tmp_path / "a.py"
        source.write_text("pass")

        with pytest.raises(PageNotFoundError):
            publish_code_page(
                client, PageDescriptor(space="X", title="Y"), source, CodeBlockOptions()
            )
