class InvariantViolation(RuntimeError):
    """
    Cube state no longer satisfies solver invariants:
    a piece was found in zero or several slots, a bounded corrective loop
    ran out of iterations, or a phase finished without its post-condition.

    Parameters
    ----------
    `phase` : str
        Name of the phase or component that detected the violation
    `message` : str
        What went wrong
    """
    def __init__(self, phase : str, message : str):
        super().__init__(f'{phase}: {message}')
        self.phase = phase
        self.message = message
