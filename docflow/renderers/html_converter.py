"""External HTML-to-PDF conversion through wkhtmltopdf."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from typing import List, Optional, Protocol

from ..config import RenderConfig
from ..engine.geometry import points_to_mm
from ..exceptions import ConversionFailedError, ExternalToolNotFoundError

logger = logging.getLogger(__name__)


class MarkupConverter(Protocol):
    """Anything that turns a complete HTML document into PDF bytes."""

    def convert(self, html: str, page_width: float, page_height: float) -> bytes:
        ...


class HTMLToPDFConverter:
    """Pipes markup through ``wkhtmltopdf`` (stdin to stdout).

    The binary path defaults to the ``WKHTMLTOPDF_PATH`` environment variable,
    falling back to ``/usr/bin/wkhtmltopdf``. Failures are not retried.
    """

    def __init__(
        self,
        tool_path: Optional[str] = None,
        timeout: Optional[float] = None,
        dpi: Optional[int] = None,
        config: Optional[RenderConfig] = None,
    ) -> None:
        config = config or RenderConfig.from_env()
        self.tool_path = tool_path or config.converter_path
        self.timeout = timeout if timeout is not None else config.converter_timeout
        self.dpi = dpi or config.converter_dpi

    def resolve_executable(self) -> str:
        if os.path.isfile(self.tool_path) and os.access(self.tool_path, os.X_OK):
            return self.tool_path
        found = shutil.which(self.tool_path)
        if not found:
            raise ExternalToolNotFoundError(self.tool_path)
        return found

    def build_command(self, executable: str, page_width: float, page_height: float) -> List[str]:
        return [
            executable,
            "--page-width", str(points_to_mm(page_width)),
            "--page-height", str(points_to_mm(page_height)),
            "--margin-top", "0",
            "--margin-bottom", "0",
            "--margin-left", "0",
            "--margin-right", "0",
            "--disable-smart-shrinking",
            "--dpi", str(self.dpi),
            "--encoding", "utf-8",
            "--quiet",
            "-",
            "-",
        ]

    def convert(self, html: str, page_width: float, page_height: float) -> bytes:
        executable = self.resolve_executable()
        cmd = self.build_command(executable, page_width, page_height)

        logger.debug(f"Running converter: {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                input=html.encode("utf-8"),
                capture_output=True,
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError as exc:
            raise ExternalToolNotFoundError(self.tool_path, str(exc)) from exc
        except subprocess.TimeoutExpired as exc:
            logger.error(f"Converter timed out after {self.timeout}s")
            raise ConversionFailedError("HTML conversion timed out", f"{self.timeout}s") from exc
        except OSError as exc:
            raise ConversionFailedError("Unable to run converter", str(exc)) from exc

        stderr = (result.stderr or b"").decode("utf-8", errors="replace").strip()
        if stderr:
            logger.debug(f"Converter stderr: {stderr}")

        if result.returncode != 0:
            logger.error(f"Converter failed with code {result.returncode}")
            raise ConversionFailedError(
                "HTML conversion failed",
                stderr or f"exit code {result.returncode}",
                returncode=result.returncode,
                stderr=stderr,
            )
        if not result.stdout:
            logger.error("Converter produced no output")
            raise ConversionFailedError(
                "HTML conversion failed",
                stderr or "empty output",
                returncode=result.returncode,
                stderr=stderr,
            )
        return result.stdout
