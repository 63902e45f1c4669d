from slackistrano.messaging.base import Base


class Default(Base):
    """Plain-text messages for every lifecycle event except ``starting``."""
