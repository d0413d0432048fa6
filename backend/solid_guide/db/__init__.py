# Database package initialization
# SQLAlchemy engine helpers and the ORM model behind the DIP example store
