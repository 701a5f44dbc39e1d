"""adsops — Google Ads credential setup and sales-channel smoke tooling."""

__version__ = "0.1.0"
