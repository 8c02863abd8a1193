import attrs


@attrs.define(frozen=True)
class UserEntity:
    """Authenticated customer; immutable for the rest of the session"""

    id: int
    handle: str
    full_name: str = ''
