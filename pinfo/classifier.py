"""
Binary verdicts about a file from a model.

The model lives outside this package. `ExternalClassifier` runs it as a
separate process that prints 0 (negative), 1 (positive) or -1 (the model
failed) for the path it is given.
"""
import shlex
import subprocess
from abc import ABC, abstractmethod

from pinfo.config import DEFAULT_CLASSIFIER_CMD, DEFAULT_CLASSIFIER_TIMEOUT
from pinfo.errors import ClassifierError
from pinfo.log import get_logger

logger = get_logger(__name__)

NEGATIVE = 0
POSITIVE = 1
MODEL_ERROR = -1


class Classifier(ABC):
    """Something that can label a file positive or negative."""

    @abstractmethod
    def classify(self, path):
        """Return True or False for the file, raise ClassifierError otherwise."""


def parse_verdict(output):
    """Map classifier stdout to True/False.

    Raises ClassifierError for -1 and for anything that is not 0 or 1.
    """
    text = (output or '').strip()
    try:
        code = int(text)
    except ValueError:
        raise ClassifierError(f"Unparseable classifier output: {text!r}", output=text) from None

    if code == POSITIVE:
        return True
    if code == NEGATIVE:
        return False
    if code == MODEL_ERROR:
        raise ClassifierError("Classifier model reported an error", output=text)
    raise ClassifierError(f"Unexpected classifier output: {code}", output=text)


class ExternalClassifier(Classifier):
    """Runs `command + [path]` and reads the verdict from stdout."""

    def __init__(self, command=None, timeout=DEFAULT_CLASSIFIER_TIMEOUT):
        if command is None:
            command = shlex.split(DEFAULT_CLASSIFIER_CMD)
        elif isinstance(command, str):
            command = shlex.split(command)
        self.command = list(command)
        self.timeout = timeout

    def classify(self, path):
        cmd = self.command + [str(path)]
        logger.debug(f"Running classifier: {' '.join(cmd)}")

        try:
            proc = subprocess.run(
                cmd, capture_output=True, text=True, errors='replace', timeout=self.timeout
            )
        except subprocess.TimeoutExpired as e:
            raise ClassifierError(f"Classifier timed out after {self.timeout}s", command=cmd) from e
        except OSError as e:
            raise ClassifierError(f"Could not start classifier: {e}", command=cmd) from e

        if proc.returncode != 0:
            stderr = (proc.stderr or '').strip()
            raise ClassifierError(
                f"Classifier exited with status {proc.returncode}" + (f": {stderr}" if stderr else ''),
                command=cmd,
                output=proc.stdout
            )

        return parse_verdict(proc.stdout)
