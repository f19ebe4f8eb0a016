"""Domain layer for VPC config resolution."""
