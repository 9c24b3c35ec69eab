"""External sidebar-position assignment"""

import logging
import shlex
import subprocess
from pathlib import Path
from typing import Optional

from mdauto.core.errors import SidebarAssignmentError


logger = logging.getLogger(__name__)


def assign_sidebar_position(path: Path, command: Optional[str]) -> bool:
    """Run ``command <path>``, which is expected to update sidebar_position in place.

    Returns False when no command is configured.
    """
    if not command:
        logger.debug("No sidebar command configured; skipping %s", path)
        return False
    argv = shlex.split(command) + [str(path)]
    logger.info("Assigning sidebar position: %s", " ".join(argv))
    try:
        subprocess.run(argv, check=True)
    except (OSError, subprocess.CalledProcessError) as e:
        raise SidebarAssignmentError(f"Sidebar assignment failed for {path}: {e}") from e
    return True
