"""Exception types raised by the ordering core."""


class PizzeriaError(Exception):
    """Base class for all pizzeria errors."""


class ProfileNotFoundError(PizzeriaError, LookupError):
    """No customer profile is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No profile found for {name!r}. Please create a profile first.")
        self.name = name


class ValidationGap(PizzeriaError, ValueError):
    """A pizza was built with required fields left empty."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__(f"Missing required pizza fields: {', '.join(missing)}")
        self.missing = missing
