"""
blctl - Backlight brightness control package

Reads a backlight's raw brightness from sysfs and reports it as a percentage
of the device maximum. The brightness can be set to an explicit percentage or
adjusted by a relative amount before it is reported.

Core modules:
- device: Raw integer access to the sysfs control files
- engine: Percentage conversion, validation and the get/set/adjust operations
- config: Backlight directory resolution and runtime settings
- errors: Typed failures raised by the device and engine layers
- cli: Command-line front end
"""

__version__ = "0.3.0"
