"""Runtime configuration for rendering and the external markup converter."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_CONVERTER_PATH = "/usr/bin/wkhtmltopdf"

ENV_CONVERTER_PATH = "WKHTMLTOPDF_PATH"
ENV_CONVERTER_TIMEOUT = "DOCFLOW_CONVERTER_TIMEOUT"
ENV_LOG_LEVEL = "DOCFLOW_LOG_LEVEL"


@dataclass(frozen=True)
class RenderConfig:
    """
    Rendering configuration.

    Attributes:
        converter_path: Path (or command name) of the HTML-to-PDF converter.
        converter_timeout: Seconds to wait for the converter; ``None`` waits forever.
        converter_dpi: Resolution passed to the converter.
        html_title: Title embedded in the generated ``<head>``.
        html_lang: Value of the ``lang`` attribute on ``<html>``.
        log_level: Default level used by the command line entry point.
    """

    converter_path: str = DEFAULT_CONVERTER_PATH
    converter_timeout: Optional[float] = 60.0
    converter_dpi: int = 96
    html_title: str = "Document"
    html_lang: str = "en"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RenderConfig":
        env = os.environ if environ is None else environ
        timeout = cls.converter_timeout
        raw_timeout = env.get(ENV_CONVERTER_TIMEOUT)
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as exc:
                raise ValueError(f"{ENV_CONVERTER_TIMEOUT} must be a number, got {raw_timeout!r}") from exc
            if timeout <= 0:
                timeout = None
        return cls(
            converter_path=env.get(ENV_CONVERTER_PATH) or DEFAULT_CONVERTER_PATH,
            converter_timeout=timeout,
            log_level=(env.get(ENV_LOG_LEVEL) or cls.log_level).upper(),
        )
