import inspect
import threading


class EvaluationError(Exception):
    """Raised when evaluating an element of a lazy view fails."""


class EmptySequenceError(ValueError):
    """Raised by strict reductions when the sequence has no element."""


# Settings --------------------------------------------------------------------

def seterr(evaluation=None):
    """Set how errors are handled.

    Args:
        evaluation (str): how errors from user code triggered while
            iterating or indexing a lazy view are propagated:

            - `'wrap'`: raise :class:`EvaluationError` with original error as
              its cause.
            - `'passthrough'`: let the error propagate through SeqExt code,
              might facilitate step-by-step debugging.
            - `None` leave unchanged and return current setting
    Returns:
        The setting value.
    """
    if evaluation == 'wrap':
        error_config.passthrough = False
    elif evaluation == 'passthrough':
        error_config.passthrough = True
    elif evaluation is not None:
        raise ValueError("evaluation must be 'wrap' or 'passthrough'")

    return "passthrough" if error_config.passthrough else 'wrap'


class ErrorConfig(threading.local):
    def __init__(self):
        super().__init__()
        self.passthrough = False


error_config = ErrorConfig()


def raise_evaluation_error(cause, item, view):
    """Re-raise `cause` from a view, wrapped according to :func:`seterr`.

    Must be called from the `except` block that caught `cause`.
    """
    if seterr() == 'passthrough' or isinstance(cause, EvaluationError):
        raise cause

    msg = "Failed to evaluate item {} in {} created at:\n{}".format(
        item, view.__class__.__name__, view.stack)
    raise EvaluationError(msg) from cause


# Helpers ---------------------------------------------------------------------

def unindent(lines):
    if lines is None:
        return []

    prefix = lines[0]
    while len(prefix) > 0 and not prefix.isspace():
        prefix = prefix[:-1]

    for line in lines[1:]:
        while not line.startswith(prefix):
            prefix = prefix[:-1]

    return [line[len(prefix):] for line in lines]


def format_stack(skip=1):
    out = ""
    for frame in inspect.stack()[:skip:-1]:
        _, filename, lineno, function, code_context, _ = frame
        out += "  File \"{}\", line {}, in {}\n".format(
            filename, lineno, function)
        for line in unindent(code_context):
            out += "    " + line

    return out
