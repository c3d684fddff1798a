"""Turn-based tactical encounter on an isometric grid."""
