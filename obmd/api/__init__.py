"""API module for obmd.

Pure transformation functions live in the domain packages; the ``cmd_*``
functions wrap them for the CLI using the StageResult pattern.
"""
