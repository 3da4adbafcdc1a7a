"""Device abstraction for block matrices."""

from __future__ import annotations

from typing import Optional, Union

import torch


class Device:
    """
    A torch device paired with the complex dtype used for gate matrices.

    Attributes should be treated as read-only after construction.
    """

    def __init__(
        self,
        name: str,
        torch_device: torch.device,
        complex_dtype: torch.dtype = torch.complex128,
    ) -> None:
        """
        Initialize a Device.

        Args:
            name: Logical device name ("cpu" or "cuda").
            torch_device: Underlying PyTorch device.
            complex_dtype: Complex dtype for matrices created on this device.
        """
        if not complex_dtype.is_complex:
            raise ValueError(f"complex_dtype must be complex, got {complex_dtype}")
        self.name = name
        self.torch_device = torch_device
        self.complex_dtype = complex_dtype

    def __repr__(self) -> str:
        return (
            f"Device(name={self.name!r}, torch_device={self.torch_device}, "
            f"complex_dtype={self.complex_dtype})"
        )

    def as_torch_device(self) -> torch.device:
        """Return the underlying PyTorch device."""
        return self.torch_device


def device(name: str) -> Device:
    """
    Create a Device from its name.

    Supported names are "cpu" and "cuda".

    Raises:
        RuntimeError: If "cuda" is requested but CUDA is not available.
        ValueError: If the name is not supported.
    """
    if name == "cpu":
        return Device(name="cpu", torch_device=torch.device("cpu"))
    if name == "cuda":
        if not torch.cuda.is_available():
            raise RuntimeError(
                "CUDA device requested but torch.cuda.is_available() is False"
            )
        return Device(name="cuda", torch_device=torch.device("cuda"))
    raise ValueError(
        f"Unsupported device name: {name!r}. Supported devices: ['cpu', 'cuda']"
    )


def default_device() -> Device:
    """Return the default CPU device."""
    return device("cpu")


def resolve_torch_device(
    dev: Optional[Union[Device, torch.device, str]] = None,
) -> torch.device:
    """
    Normalize a ``device=`` argument to a ``torch.device``.

    Accepts a Device, a torch.device, a device string, or None (CPU).
    """
    if dev is None:
        return default_device().as_torch_device()
    if isinstance(dev, Device):
        return dev.as_torch_device()
    return torch.device(dev)
