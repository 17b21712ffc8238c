"""scenes — pygame scenes and their drawing helpers."""
