"""Contract violation exceptions.

Every failure raised by a check is a subclass of ContractViolation so callers
can catch contract failures uniformly.  Each façade raises its own family
(validation, requirement, ensurance, invariance) and each family has one
class per failure kind.  The kinds also derive from the matching builtin, so
``except ValueError`` still catches an illegal argument.
"""


class ContractViolation(Exception):
    """Base class for all contract failures."""


# --- Validation (general purpose) ---------------------------------------------


class ValidationException(ContractViolation):
    """A validated value did not satisfy a check."""


class IllegalArgumentValidationException(ValidationException, ValueError):
    pass


class NullPointerValidationException(ValidationException, TypeError):
    pass


class IndexOutOfBoundsValidationException(ValidationException, IndexError):
    pass


class IllegalStateValidationException(ValidationException, RuntimeError):
    pass


# --- Requirement (preconditions) ----------------------------------------------


class RequirementException(ContractViolation):
    """A precondition of the caller was not met."""


class IllegalArgumentRequirementException(RequirementException, ValueError):
    pass


class NullPointerRequirementException(RequirementException, TypeError):
    pass


class IndexOutOfBoundsRequirementException(RequirementException, IndexError):
    pass


class IllegalStateRequirementException(RequirementException, RuntimeError):
    pass


# --- Ensurance (postconditions) -----------------------------------------------


class EnsuranceException(ContractViolation):
    """A postcondition did not hold on the way out."""


class IllegalArgumentEnsuranceException(EnsuranceException, ValueError):
    pass


class NullPointerEnsuranceException(EnsuranceException, TypeError):
    pass


class IndexOutOfBoundsEnsuranceException(EnsuranceException, IndexError):
    pass


class IllegalStateEnsuranceException(EnsuranceException, RuntimeError):
    pass


# --- Invariance ---------------------------------------------------------------


class InvarianceException(ContractViolation):
    """An invariant was broken."""


class IllegalArgumentInvarianceException(InvarianceException, ValueError):
    pass


class NullPointerInvarianceException(InvarianceException, TypeError):
    pass


class IndexOutOfBoundsInvarianceException(InvarianceException, IndexError):
    pass


class IllegalStateInvarianceException(InvarianceException, RuntimeError):
    pass
