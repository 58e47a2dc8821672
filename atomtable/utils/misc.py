def validate_type(iterator, type_):
    """Validate all the elements of the iterable are of a particular type"""
    for item in iterator:
        if not isinstance(item, type_):
            type_name = getattr(type_, "__name__", str(type_))
            raise TypeError(
                f"Expected {item!r} to be of type {type_name} but got"
                f" {type(item).__name__} instead."
            )
