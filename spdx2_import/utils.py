import logging
import os
from typing import List, Optional

from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)

from .data import Diagnostic

logger = logging.getLogger(__package__)
handler = logging.StreamHandler()
formatter = logging.Formatter(
    f"[%(asctime)s] [{os.getpid()}] [%(levelname)s] - %(name)s: %(message)s",
    "%Y/%m/%d %H:%M:%S %z",
)
handler.setFormatter(formatter)
logger.addHandler(handler)


def report(
    diagnostics: Optional[List[Diagnostic]], node_id: str, reason: str
) -> None:
    """Log a non-fatal data error and record it in **diagnostics**, if given.

    :param diagnostics: The diagnostics list of the current extraction call.
    :type diagnostics: List[spdx2_import.data.Diagnostic] | None
    :param node_id: The id of the offending node (or the offending value).
    :type node_id: str
    :param reason: A human readable description of the problem.
    :type reason: str
    """
    logger.warning(f"{reason} (node: {node_id})")
    if diagnostics is not None:
        diagnostics.append(Diagnostic(node_id, reason))


def get_spinner_progress(text: str) -> Progress:
    return Progress(
        TextColumn(text),
        SpinnerColumn("aesthetic", "#5BC0DE"),
        TimeElapsedColumn(),
        transient=True,
    )


def get_bar_progress(text: str, color: str) -> Progress:
    return Progress(
        TextColumn(text),
        BarColumn(complete_style=color, finished_style=color),
        TaskProgressColumn(),
        TextColumn("({task.completed}/{task.total})"),
        TimeElapsedColumn(),
    )
