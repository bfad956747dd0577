from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictStr


class DiskInfo(BaseModel):
    """Usage of a single mounted filesystem on a reporting host."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    path: StrictStr = Field(..., description="Mount point, e.g. / or /var")
    usage: StrictFloat = Field(..., description="Used space in percent")
    size: StrictFloat = Field(..., description="Total size in GiB")


class HostReport(BaseModel):
    """
    Snapshot of one host's hardware and OS state, as pushed by the host itself.

    The report is immutable: a newer report for the same ip replaces it as a
    whole. GPU fields are None when the host has no GPU or did not report one
    and are left out of the encoded form in that case.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    hostname: StrictStr = Field(..., description="System hostname")
    ip: StrictStr = Field(
        ...,
        min_length=1,
        description="Address of the host, used as its identity in the registry",
    )
    uptime: StrictFloat = Field(
        ...,
        ge=0,
        description="Number of seconds since the system was booted",
    )
    cpu_usage: StrictFloat = Field(..., description="CPU utilisation in percent")
    cpu_frequency: StrictFloat = Field(..., description="Current CPU frequency")
    gpu_usage: Optional[StrictFloat] = Field(
        None,
        description="GPU utilisation in percent, if the host has a GPU",
    )
    gpu_frequency: Optional[StrictFloat] = Field(
        None,
        description="Current GPU frequency, if the host has a GPU",
    )
    cpu_temperature: StrictFloat = Field(..., description="CPU temperature")
    gpu_temperature: Optional[StrictFloat] = Field(
        None,
        description="GPU temperature, if the host has a GPU",
    )
    memory_usage: StrictFloat = Field(..., description="Used RAM in GiB")
    memory_max: StrictFloat = Field(..., description="Installed RAM in GiB")
    disks: Tuple[DiskInfo, ...] = Field(
        ...,
        description="Mounted filesystems, in the order reported by the host",
    )
    processes: Tuple[StrictStr, ...] = Field(
        ...,
        description="Names of running processes",
    )
    os_name: StrictStr = Field(..., description="Operating system name")
    os_version: StrictStr = Field(..., description="Operating system version")
    os_kernel: StrictStr = Field(..., description="Kernel release")
    os_architecture: StrictStr = Field(..., description="Machine architecture")
    cpu_model: StrictStr = Field(..., description="CPU model name")
    gpu_model: Optional[StrictStr] = Field(
        None,
        description="GPU model name, if the host has a GPU",
    )

    def to_json(self, indent: Optional[int] = None) -> str:
        """Encode the report, leaving out GPU fields that are not set."""
        return self.model_dump_json(indent=indent, exclude_none=True)
