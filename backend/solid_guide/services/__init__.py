# Services package initialization
