# Repositories package initialization
