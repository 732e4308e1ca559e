class WaterViewError(Exception):
    """
    Base exception class for dashboard errors.

    Parameters
    ----------
    message : str
        Explanation of the error.
    filename : str, optional
        Input file which caused the error.
    """

    def __init__(self, message, filename=None):
        full_message = f"{filename} - {message}" if filename else message
        super().__init__(full_message)
        self.filename = filename


class LoadError(WaterViewError):
    """
    Exception raised when an input table cannot be read or is malformed.

    Fatal at startup: the dashboard has nothing to show without both tables.
    """


class MissingColumnsError(LoadError):
    """
    Exception raised when an input table lacks required columns.

    Parameters
    ----------
    missing : list of str
        Required column names not present in the header row.
    filename : str, optional
        Input file which caused the error.
    """

    def __init__(self, missing, filename=None):
        self.missing = list(missing)
        super().__init__(f"Missing required columns: {', '.join(self.missing)}", filename)


class InvalidSelectionError(WaterViewError):
    """
    Exception raised when a selection event names a site or parameter
    outside the loaded data.

    Parameters
    ----------
    field : str
        Either ``"site"`` or ``"parameter"``.
    value : str
        The rejected name.
    """

    def __init__(self, field, value):
        self.field = field
        self.value = value
        super().__init__(f"Unknown {field}: {value!r}")


class SelectionNotReadyError(InvalidSelectionError):
    """Exception raised when the selection is used before data is loaded."""

    def __init__(self):
        WaterViewError.__init__(self, "Selection state is not initialized")
        self.field = None
        self.value = None
