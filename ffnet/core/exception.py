class DimensionMismatch(ValueError):
    """ Raised when matrix operands or caller inputs have incompatible shapes
    """


class UninitializedModel(Exception):
    """ Raised when trying to access properties or methods that require a
    trained network
    """
