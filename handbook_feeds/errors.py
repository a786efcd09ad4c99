class ToolError(Exception):
    """A fatal condition: report it and exit with status 1."""


class FeedTemplateError(ToolError):
    pass


class IndexPageError(ToolError):
    pass
