from .image_command import CommandRoute, ImageCommandHandler

__all__ = ["CommandRoute", "ImageCommandHandler"]
