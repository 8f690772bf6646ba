#!/usr/bin/env python3
"""
Ghostscript PDF Compressor
Rewrites a PDF through Ghostscript's pdfwrite device at one of its quality presets.
"""

import logging
import os
import subprocess
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)

GS_EXECUTABLE = "gs"
COMPATIBILITY_LEVEL = "1.4"


class Mode(str, Enum):
    """Ghostscript PDFSETTINGS presets, from smallest to largest output."""

    SCREEN = ("screen", "75ppi, lowest file size")
    EBOOK = ("ebook", "150ppi, medium file size")
    PREPRESS = ("prepress", "300ppi, large file size")
    PRINT = ("print", "600ppi, largest file size")

    def __new__(cls, value: str, description: str):
        member = str.__new__(cls, value)
        member._value_ = value
        member.description = description
        return member

    def __str__(self) -> str:
        return self.value

    @property
    def pdf_setting(self) -> str:
        return f"/{self.value.lower()}"


DEFAULT_MODE = Mode.EBOOK


class GhostscriptError(Exception):
    """Base class for failures to run Ghostscript."""


class GhostscriptLaunchError(GhostscriptError):
    """Ghostscript could not be started."""


class GhostscriptWaitError(GhostscriptError):
    """The Ghostscript process could not be waited on."""


@dataclass(frozen=True)
class InvocationPlan:
    """Fully resolved input for one Ghostscript run."""

    source_path: Path
    destination_path: Path
    mode: Mode = DEFAULT_MODE


def get_file_size(file_path) -> int:
    """Get file size in bytes."""
    return os.path.getsize(file_path)


def format_size(size_bytes: float) -> str:
    """Format bytes to human-readable format."""
    for unit in ['B', 'KB', 'MB', 'GB']:
        if size_bytes < 1024.0:
            return f"{size_bytes:.2f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.2f} TB"


def build_gs_args(plan: InvocationPlan) -> List[str]:
    """
    Build the Ghostscript argument list for a plan.

    The order is fixed: device, compatibility level, the non-interactive
    switches, output file, quality preset and finally the source document.
    """
    return [
        "-sDEVICE=pdfwrite",
        f"-dCompatibilityLevel={COMPATIBILITY_LEVEL}",
        "-dNOPAUSE",
        "-dQUIET",
        "-dBATCH",
        f"-sOutputFile={os.fspath(plan.destination_path)}",
        f"-dPDFSETTINGS={plan.mode.pdf_setting}",
        os.fspath(plan.source_path),
    ]


def build_gs_command(plan: InvocationPlan) -> List[str]:
    return [GS_EXECUTABLE] + build_gs_args(plan)


def compress_pdf(plan: InvocationPlan) -> int:
    """
    Compress a PDF by running Ghostscript and waiting for it to exit.

    Args:
        plan: Resolved source, destination and mode

    Returns:
        Ghostscript's exit status. A non-zero status is logged but still
        counts as a completed run.

    Raises:
        GhostscriptLaunchError: if the gs executable could not be started
        GhostscriptWaitError: if the child process could not be waited on
    """
    command = build_gs_command(plan)
    logger.debug("Running: %s", " ".join(command))

    try:
        process = subprocess.Popen(command)
    except OSError as e:
        raise GhostscriptLaunchError(f"Could not start {GS_EXECUTABLE}: {e}") from e

    # Waited on once. If that fails the child is left to run to completion
    # unreaped; it is never killed or waited on again.
    try:
        returncode = process.wait()
    except OSError as e:
        raise GhostscriptWaitError(f"Could not wait for {GS_EXECUTABLE}: {e}") from e

    if returncode != 0:
        logger.warning("%s exited with status %d", GS_EXECUTABLE, returncode)
    else:
        logger.info("%s finished: %s", GS_EXECUTABLE, plan.destination_path)
    return returncode
