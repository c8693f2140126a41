"""agentcore: command-line dispatcher for an .agent knowledge base."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("agentcore")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
