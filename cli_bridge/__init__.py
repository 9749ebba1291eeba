"""cli-bridge

Translates OpenAI chat completion requests into single-turn CLI invocations.
"""

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("cli-bridge")
except PackageNotFoundError:
    # Running from a source checkout without an install
    __version__ = "0.1.0"
__author__ = "cli-bridge"
