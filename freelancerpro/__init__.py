"""FreelancerPro - local business-management data layer for freelancers."""

__version__ = "1.0.0"
