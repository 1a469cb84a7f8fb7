"""Virtio MMIO register offsets and virtqueue record layouts."""

from __future__ import annotations

import dataclasses
import struct
from dataclasses import dataclass

# MMIO control registers, offsets from the device base address.
VIRTIO_MMIO_MAGIC_VALUE = 0x000
VIRTIO_MMIO_VERSION = 0x004
VIRTIO_MMIO_DEVICE_ID = 0x008
VIRTIO_MMIO_VENDOR_ID = 0x00C
VIRTIO_MMIO_DEVICE_FEATURES = 0x010
VIRTIO_MMIO_DRIVER_FEATURES = 0x020
VIRTIO_MMIO_QUEUE_SEL = 0x030
VIRTIO_MMIO_QUEUE_NUM_MAX = 0x034
VIRTIO_MMIO_QUEUE_NUM = 0x038
VIRTIO_MMIO_QUEUE_READY = 0x044
VIRTIO_MMIO_QUEUE_NOTIFY = 0x050
VIRTIO_MMIO_INTERRUPT_STATUS = 0x060
VIRTIO_MMIO_INTERRUPT_ACK = 0x064
VIRTIO_MMIO_STATUS = 0x070
VIRTIO_MMIO_QUEUE_DESC_LOW = 0x080
VIRTIO_MMIO_QUEUE_DESC_HIGH = 0x084
VIRTIO_MMIO_DRIVER_DESC_LOW = 0x090
VIRTIO_MMIO_DRIVER_DESC_HIGH = 0x094
VIRTIO_MMIO_DEVICE_DESC_LOW = 0x0A0
VIRTIO_MMIO_DEVICE_DESC_HIGH = 0x0A4

# Status register bits.
VIRTIO_CONFIG_S_ACKNOWLEDGE = 1
VIRTIO_CONFIG_S_DRIVER = 2
VIRTIO_CONFIG_S_DRIVER_OK = 4
VIRTIO_CONFIG_S_FEATURES_OK = 8

# Device feature bits.
VIRTIO_BLK_F_RO = 5
VIRTIO_BLK_F_SCSI = 7
VIRTIO_BLK_F_CONFIG_WCE = 11
VIRTIO_BLK_F_MQ = 12
VIRTIO_F_ANY_LAYOUT = 27
VIRTIO_RING_F_INDIRECT_DESC = 28
VIRTIO_RING_F_EVENT_IDX = 29

# Number of descriptors; must be a power of two.
NUM = 8

VRING_DESC_F_NEXT = 1
VRING_DESC_F_WRITE = 2

VIRTIO_BLK_T_IN = 0
VIRTIO_BLK_T_OUT = 1

_DESC = struct.Struct("<QIHH")
_USED_ELEM = struct.Struct("<II")
_BLK_REQ = struct.Struct("<IIQ")


def _pack(layout: struct.Struct, record: object) -> bytes:
    try:
        return layout.pack(*dataclasses.astuple(record))
    except struct.error as exc:
        raise ValueError(f"field out of range: {exc}") from exc


def _unpack(layout: struct.Struct, data: bytes, what: str) -> tuple:
    if len(data) < layout.size:
        raise ValueError(f"need {layout.size} bytes for {what}, got {len(data)}")
    return layout.unpack_from(data)


@dataclass(frozen=True)
class VirtqDesc:
    """A single virtqueue descriptor."""

    addr: int = 0
    len: int = 0
    flags: int = 0
    next: int = 0

    def pack(self) -> bytes:
        """Encode the descriptor as the device reads it."""
        return _pack(_DESC, self)


@dataclass(frozen=True)
class VirtqUsedElem:
    """An entry of the used ring, reporting a completed request."""

    id: int = 0
    len: int = 0

    def pack(self) -> bytes:
        """Encode the used-ring entry."""
        return _pack(_USED_ELEM, self)


@dataclass(frozen=True)
class VirtioBlkReq:
    """The first descriptor's payload in a block-device request."""

    type: int = VIRTIO_BLK_T_IN
    reserved: int = 0
    sector: int = 0

    def pack(self) -> bytes:
        """Encode the request header."""
        return _pack(_BLK_REQ, self)


def unpack_virtq_desc(data: bytes) -> VirtqDesc:
    """Decode a descriptor from the start of data."""
    return VirtqDesc(*_unpack(_DESC, data, "a descriptor"))


def unpack_virtq_used_elem(data: bytes) -> VirtqUsedElem:
    """Decode a used-ring entry from the start of data."""
    return VirtqUsedElem(*_unpack(_USED_ELEM, data, "a used-ring entry"))


def unpack_virtio_blk_req(data: bytes) -> VirtioBlkReq:
    """Decode a block request header from the start of data."""
    return VirtioBlkReq(*_unpack(_BLK_REQ, data, "a block request"))