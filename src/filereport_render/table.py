"""Render an extension report as a minimal HTML table."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Union

from jinja2 import Environment

from filereport_core.errors import WriteError
from filereport_core.sizes import format_byte_size
from filereport_data.aggregate import ExtensionGroup, Report, sort_groups

# lstrip_blocks + trim_blocks drop the {% for %} lines entirely
REPORT_TEMPLATE = """\
<html>
  <body>
    <table>
      <thead>
        <tr>
          <th>Type</th>
          <th>Count</th>
          <th>Size</th>
        </tr>
      </thead>
      <tbody>
      {% for group in groups %}
        <tr>
          <td>{{ group.extension }}</td>
          <td>{{ group.count }}</td>
          <td>{{ group.total_bytes | filesize }}</td>
        </tr>
      {% endfor %}
      </tbody>
    </table>
  </body>
</html>
"""


def _build_environment() -> Environment:
    env = Environment(
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["filesize"] = format_byte_size
    return env


_ENV = _build_environment()
_TEMPLATE = _ENV.from_string(REPORT_TEMPLATE)


def render(groups: Iterable[ExtensionGroup]) -> str:
    """Render groups as an HTML document, largest total size first.

    Extension strings are HTML-escaped.
    """
    return _TEMPLATE.render(groups=sort_groups(groups))


def render_report(report: Report) -> str:
    return render(report.groups)


def write_report(document: str, path: Union[str, Path]) -> None:
    """Write the rendered document as UTF-8, replacing any existing file.

    The document is encoded before the file is opened, so an encoding failure
    leaves any existing report untouched. Parent directories are not created.

    Raises:
        WriteError: If the document cannot be encoded or the file written
    """
    try:
        data = document.encode("utf-8")
        with open(path, "wb") as f:
            f.write(data)
    except (OSError, UnicodeError) as exc:
        raise WriteError(str(path), exc) from exc
