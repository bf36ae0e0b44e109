"""Domain layer: DTOs, exceptions, ports and pure logic."""
