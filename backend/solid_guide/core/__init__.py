# Core package initialization
# Configuration, logging and error types shared across the guide
