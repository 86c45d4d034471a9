from .window import DeliveryWindow

__all__ = ["DeliveryWindow"]
