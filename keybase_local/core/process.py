#!/usr/bin/env python3
"""
Execution of external commands
"""
import logging
import subprocess

logger = logging.getLogger(__name__)


class ProcessRunner:
    """Runs a command to completion and hands back its standard output"""

    def run(self, args):
        """
        Run a command without a shell and without a timeout

        A non-zero exit status is not an error here: pgrep, for one, exits 1
        when nothing matches. A missing executable raises FileNotFoundError.

        Args:
            args: Command and arguments

        Returns:
            str: Captured stdout
        """
        logger.debug(f"Running {' '.join(args)}")
        result = subprocess.run(args, capture_output=True, text=True, errors='replace')
        if result.returncode != 0:
            logger.debug(f"{args[0]} exited with status {result.returncode}")
        return result.stdout
