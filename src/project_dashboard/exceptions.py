class DashboardError(Exception):
    """Base error for dashboard operations."""

    pass


class CSVFileError(DashboardError):
    """Raised when an uploaded CSV file cannot be used at all."""

    pass


class InvalidFileTypeError(CSVFileError):
    """Raised when the uploaded file is not a CSV file."""

    def __init__(self, message: str = "Please upload a CSV file"):
        super().__init__(message)


class FileReadError(CSVFileError):
    """Raised when the uploaded file cannot be read."""

    def __init__(self, message: str = "Error reading the file"):
        super().__init__(message)


class ProjectNotFoundError(DashboardError):
    def __init__(self, project_id: str):
        self.project_id = project_id
        super().__init__(f"Project not found: {project_id}")


class DuplicateTagError(DashboardError):
    def __init__(self, tag: str):
        self.tag = tag
        super().__init__("Tag already exists")


class StoreError(DashboardError):
    """Raised when the project store cannot be written."""

    pass
