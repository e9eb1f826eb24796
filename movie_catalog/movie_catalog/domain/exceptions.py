class DomainError(Exception):
    pass


class ValidationError(DomainError):
    pass


class NotFoundError(DomainError):
    pass


class DuplicateError(DomainError):
    pass


class SubmissionInProgressError(DomainError):
    pass


class RepositoryError(DomainError):
    pass


class ConstraintViolationError(RepositoryError):
    pass
