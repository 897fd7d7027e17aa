"""Description of the host operating system."""

import platform
import subprocess

from hakjdb.errors import GetOSInfoError


def _command_output(args):
    try:
        completed = subprocess.run(args, capture_output=True, check=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        raise GetOSInfoError() from exc
    return completed.stdout.decode("utf-8", errors="replace").strip()


def get_os_info():
    """Return a short description of the operating system the server runs on."""
    os_name = platform.system().lower()
    if os_name == "linux":
        return "Linux " + _command_output(["uname", "-r", "-m"])
    if os_name == "windows":
        return _command_output(["cmd", "/c", "ver"])
    return os_name