from backend.config import load_config
from backend.db import Base, get_engine
import backend.models


def create_all_tables(config):
    Base.metadata.create_all(bind=get_engine(config))


if __name__ == "__main__":
    create_all_tables(load_config())
