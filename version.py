import os
import subprocess


version = "0.1.0"

# Development checkouts append the distance to the last release tag.
try:
    description = subprocess.check_output(
        ["git", "describe", "--tags", "--long", "--match", "v*"],
        stderr=subprocess.DEVNULL,
        cwd=os.path.dirname(os.path.abspath(__file__)),
        universal_newlines=True).strip()
except (subprocess.CalledProcessError, OSError):
    pass
else:
    tag, distance, commit = description.rsplit("-", 2)
    version = tag[1:] if distance == "0" else "{}.post{}+{}".format(
        tag[1:], distance, commit)
