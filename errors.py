class CensusMapError(Exception):
    """Base class for every error raised while building the census map."""


class DownloadError(CensusMapError):
    pass


class MissingField(CensusMapError):
    def __init__(self, field, source):
        self.field = field
        self.source = source
        super().__init__(f"Missing field '{field}' in {source}")


class MalformedNumeric(CensusMapError):
    def __init__(self, column, areas):
        self.column = column
        self.areas = list(areas)
        shown = ", ".join(str(a) for a in self.areas[:10])
        super().__init__(f"Non-numeric values in '{column}' for: {shown}")


class JoinMismatch(CensusMapError):
    """Table and geometry key sets differ, or one side repeats a key."""

    def __init__(self, missing_in_table=(), missing_in_geometry=(), duplicates=()):
        self.missing_in_table = sorted(missing_in_table)
        self.missing_in_geometry = sorted(missing_in_geometry)
        self.duplicates = sorted(duplicates)
        parts = []
        if self.missing_in_table:
            parts.append(f"no census row for areas {self.missing_in_table}")
        if self.missing_in_geometry:
            parts.append(f"no polygon for areas {self.missing_in_geometry}")
        if self.duplicates:
            parts.append(f"duplicate area numbers {self.duplicates}")
        super().__init__("Join mismatch: " + "; ".join(parts))


class UnknownIndicator(CensusMapError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown indicator '{name}'")
