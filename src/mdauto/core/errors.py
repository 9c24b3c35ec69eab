"""Exception types raised by the region and path checks"""


class MarkerError(ValueError):
    """The auto-generated region markers are structurally invalid; the file must not be written."""


class MarkerDuplication(MarkerError):
    def __init__(self, top: int, bottom: int):
        super().__init__(f"Marker duplication detected (top={top}, bottom={bottom})")
        self.top = top
        self.bottom = bottom


class MarkerMismatch(MarkerError):
    def __init__(self, top: int, bottom: int):
        which = "top present without bottom" if top else "bottom present without top"
        super().__init__(f"Marker mismatch: {which}")
        self.top = top
        self.bottom = bottom


class MarkerOrderInvalid(MarkerError):
    def __init__(self, top_line: int, bottom_line: int):
        super().__init__(
            f"Marker positions invalid: bottom marker (line {bottom_line + 1}) "
            f"precedes top marker (line {top_line + 1})"
        )
        self.top_line = top_line
        self.bottom_line = bottom_line


class PathEscapeError(ValueError):
    """A target path resolves outside the documents root."""


class SidebarAssignmentError(RuntimeError):
    """The external sidebar-position assigner failed."""


class FrontmatterDecodeError(ValueError):
    """Frontmatter YAML could not be decoded, so it cannot be safely rewritten."""


class DocumentReadError(OSError):
    """A document is not valid UTF-8; reported like any other read failure."""
