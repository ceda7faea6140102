"""Test SCORM manifest generation."""

from pathlib import Path

from bs4 import BeautifulSoup

from courseware.errors import FilesystemError
from courseware.manifest import (
    AUXILIARY_FILES,
    PACKAGE_IDENTIFIER,
    build_manifest,
    generate_manifest,
)


def hrefs(xml: str) -> list:
    soup = BeautifulSoup(xml, "lxml-xml")
    return [tag["href"] for tag in soup.find_all("file")]


def touch(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("<html></html>", encoding="utf-8")


def test_build_manifest_lists_resources_then_fixed_files():
    xml = build_manifest(["resources/intro.html", "resources/guide/a.html"])
    assert hrefs(xml) == [
        "resources/intro.html",
        "resources/guide/a.html",
        *AUXILIARY_FILES,
    ]


def test_build_manifest_fixed_metadata():
    soup = BeautifulSoup(build_manifest([]), "lxml-xml")
    manifest = soup.find("manifest")
    assert manifest["identifier"] == PACKAGE_IDENTIFIER
    assert soup.find("schemaversion").string == "1.2"
    assert soup.find("organizations")["default"] == "four_geeks_academy_org"
    organization = soup.find("organization")
    assert organization["identifier"] == "four_geeks_academy_org"
    assert organization.find("title").string == "Prompt Engineering Course"
    item = soup.find("item")
    assert item["identifierref"] == "resource"
    assert item.find("title").string == "Prompt Engineering"
    resource = soup.find("resource")
    assert resource["identifier"] == "resource"
    assert resource["href"] == "config/index.html"
    assert resource["type"] == "webcontent"


def test_build_manifest_escapes_hrefs():
    xml = build_manifest(['resources/q&a "faq".html'])
    assert 'href="resources/q&amp;a &quot;faq&quot;.html"' in xml
    assert hrefs(xml)[0] == 'resources/q&a "faq".html'


def test_generate_manifest_scans_two_levels(tmp_path, capsys):
    out = tmp_path / "resources"
    touch(out / "intro.html")
    touch(out / "guide" / "setup.html")
    touch(out / "guide" / "deep" / "extra.html")
    touch(out / "styles" / "styles.css")
    manifest_path = tmp_path / "imsmanifest.xml"

    result = generate_manifest(out, manifest_path)

    assert result.ok
    assert result.resources == [
        "resources/intro.html",
        "resources/guide/setup.html",
    ]
    listed = hrefs(manifest_path.read_text(encoding="utf-8"))
    assert listed[:2] == result.resources
    assert len(listed) == len(set(listed))
    assert "Generated imsmanifest.xml" in capsys.readouterr().out


def test_generate_manifest_replaces_previous_file(tmp_path):
    out = tmp_path / "resources"
    touch(out / "intro.html")
    manifest_path = tmp_path / "imsmanifest.xml"
    manifest_path.write_text("<old/>", encoding="utf-8")

    generate_manifest(out, manifest_path)

    assert "<old/>" not in manifest_path.read_text(encoding="utf-8")


def test_generate_manifest_uses_output_dir_name_as_prefix(tmp_path):
    out = tmp_path / "pages"
    touch(out / "intro.html")

    result = generate_manifest(out, tmp_path / "imsmanifest.xml")

    assert result.resources == ["pages/intro.html"]


def test_generate_manifest_logs_scan_failure(tmp_path, capsys):
    manifest_path = tmp_path / "imsmanifest.xml"

    result = generate_manifest(tmp_path / "missing", manifest_path)

    assert isinstance(result.error, FilesystemError)
    assert not manifest_path.exists()
    assert "Error generating imsmanifest.xml" in capsys.readouterr().err
