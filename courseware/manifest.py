"""Build the SCORM 1.2 package manifest for the generated pages."""

from __future__ import annotations

import sys
from html import escape
from pathlib import Path
from typing import Iterable, Optional

from .errors import FilesystemError
from .models import ListingResult
from .walk import scan_resources

STAGE_NAME = "manifest"
PACKAGE_IDENTIFIER = "com.scorm.golfsamples.runtime.basicruntime.12"
ORGANIZATION_IDENTIFIER = "four_geeks_academy_org"
ORGANIZATION_TITLE = "Prompt Engineering Course"
ITEM_TITLE = "Prompt Engineering"
RESOURCE_IDENTIFIER = "resource"
LAUNCH_HREF = "config/index.html"
AUXILIARY_FILES = (
    "config/index.html",
    "config/api.js",
    "resources/styles/styles.css",
)

MANIFEST_TEMPLATE = """<?xml version="1.0" standalone="no"?>
<manifest identifier="{package}" version="1"
  xmlns="http://www.imsproject.org/xsd/imscp_rootv1p1p2"
  xmlns:adlcp="http://www.adlnet.org/xsd/adlcp_rootv1p2"
  xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
  xsi:schemaLocation="http://www.imsproject.org/xsd/imscp_rootv1p1p2 imscp_rootv1p1p2.xsd
                      http://www.imsglobal.org/xsd/imsmd_rootv1p2p1 imsmd_rootv1p2p1.xsd
                      http://www.adlnet.org/xsd/adlcp_rootv1p2 adlcp_rootv1p2.xsd">

  <metadata>
    <schema>ADL SCORM</schema>
    <schemaversion>1.2</schemaversion>
  </metadata>
  <organizations default="{organization}">
    <organization identifier="{organization}">
      <title>{organization_title}</title>
      <item identifier="item_1" identifierref="{resource}">
        <title>{item_title}</title>
      </item>
    </organization>
  </organizations>
  <resources>
    <resource identifier="{resource}" type="webcontent" adlcp:scormtype="sco"
      href="{launch}">
{files}
    </resource>
  </resources>
</manifest>"""


def file_element(href: str) -> str:
    return f'      <file href="{escape(href, quote=True)}" />'


def build_manifest(resources: Iterable[str]) -> str:
    """Return the manifest XML listing ``resources`` and the fixed files."""

    hrefs = [*resources, *AUXILIARY_FILES]
    return MANIFEST_TEMPLATE.format(
        package=PACKAGE_IDENTIFIER,
        organization=ORGANIZATION_IDENTIFIER,
        organization_title=ORGANIZATION_TITLE,
        item_title=ITEM_TITLE,
        resource=RESOURCE_IDENTIFIER,
        launch=LAUNCH_HREF,
        files="\n".join(file_element(href) for href in hrefs),
    )


def generate_manifest(
    output_dir: Path,
    manifest_path: Path,
    prefix: Optional[str] = None,
) -> ListingResult:
    """Scan ``output_dir`` and overwrite ``manifest_path`` from scratch."""

    output_dir = Path(output_dir)
    manifest_path = Path(manifest_path)
    result = ListingResult(name=STAGE_NAME, path=manifest_path)
    try:
        result.resources = scan_resources(
            output_dir, prefix or output_dir.name
        )
        payload = build_manifest(result.resources)
        try:
            manifest_path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            raise FilesystemError("write", manifest_path, str(exc)) from exc
        print(f"Generated {manifest_path.name}")
    except Exception as exc:
        result.error = exc
        print(
            f"⚠️ Error generating {manifest_path.name}: {exc}",
            file=sys.stderr,
        )
    return result


__all__ = [
    "AUXILIARY_FILES",
    "PACKAGE_IDENTIFIER",
    "build_manifest",
    "generate_manifest",
]
