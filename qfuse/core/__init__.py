"""Core abstractions shared by the kernel and the circuit layer."""

from .device import Device, default_device, device, resolve_torch_device

__all__ = ["Device", "device", "default_device", "resolve_torch_device"]
