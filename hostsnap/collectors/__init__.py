"""Metric collectors for hostname, network, CPU, memory, disk and sensors."""
