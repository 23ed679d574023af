"""Exception types raised by the relighting pipeline."""


class RelightError(ValueError):
    """Base class for all relighting errors."""


class DimensionMismatchError(RelightError):
    """Image and normal map do not share the same width and height."""
    
    def __init__(self, image_shape, normal_shape):
        self.image_shape = tuple(image_shape)
        self.normal_shape = tuple(normal_shape)
        super().__init__(
            f"Image and normal map dimensions must match: "
            f"{self.image_shape[1]}x{self.image_shape[0]} != "
            f"{self.normal_shape[1]}x{self.normal_shape[0]}"
        )


class DegenerateVectorError(RelightError):
    """A zero-length vector cannot be normalized."""


class InvalidLightParameterError(RelightError):
    """A light or blend parameter is outside its valid range."""


class ImageLoadError(RelightError):
    """An input image could not be found or decoded."""
