"""Errors raised by the synchronization core.

Each of these is fatal for the command that triggered it. Per-file copy
failures during a mirror are not raised; they are recorded as
``Outcome.FAILED`` results instead.
"""


class SkillSyncError(Exception):
    """Base class for fatal skill-sync errors."""

    title = "Error"


class UnknownToolError(SkillSyncError):
    """Raised when a tool id is not in the tool registry."""

    title = "Unknown Tool"

    def __init__(self, tool_id: str, known: list[str]) -> None:
        self.tool_id = tool_id
        self.known = known
        super().__init__(f'Unknown tool "{tool_id}". Supported tools: {", ".join(known)}')


class SourceNotFoundError(SkillSyncError):
    """Raised when a mirror's source tool directory does not exist."""

    title = "Source Not Found"

    def __init__(self, tool_id: str) -> None:
        self.tool_id = tool_id
        super().__init__(
            f'Source tool "{tool_id}" not found in current directory. '
            f'Run "skill-sync init {tool_id}" to create it.'
        )


class SkillNotFoundError(SkillSyncError):
    """Raised when ``global add`` cannot locate the skill to add."""

    title = "Skill Not Found"

    def __init__(self, name: str, searched: list) -> None:
        self.name = name
        self.searched = searched
        locations = "\n".join(f"- {p}" for p in searched)
        super().__init__(f'Skill "{name}" not found. Searched:\n{locations}')


class GlobalSkillNotFoundError(SkillSyncError):
    title = "Global Skill Not Found"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f'Global skill "{name}" not found. '
            'Run "skill-sync global list" to see available skills.'
        )


class NoToolsDetectedError(SkillSyncError):
    title = "No Tools Detected"

    def __init__(self) -> None:
        super().__init__(
            'No AI tool directories found in current directory. Run "skill-sync init <tool>" first.'
        )


class ScanError(SkillSyncError):
    """Raised when a directory scan fails for a reason other than a missing path."""

    title = "Scan Error"

    def __init__(self, path, error: OSError) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Failed to read {path}: {error}")


class InvalidSkillNameError(SkillSyncError):
    """Raised when a global skill name is not a single path component."""

    title = "Invalid Skill Name"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f'Invalid global skill name "{name}". '
            "Names must not be empty or contain path separators or '..'."
        )


class InvalidSkillSourceError(SkillSyncError):
    """Raised when a ``global add`` source contains the registry entry it would create."""

    title = "Invalid Skill Source"

    def __init__(self, source, target) -> None:
        self.source = source
        self.target = target
        super().__init__(f"Cannot add {source}: it contains the registry entry {target}")
