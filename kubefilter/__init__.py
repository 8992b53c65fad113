"""kubefilter: admission filter for Kubernetes watch events."""

__version__ = "0.1.0"
