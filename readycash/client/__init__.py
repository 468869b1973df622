# Gateway client
from readycash.client.authenticator import Authenticator as Authenticator
from readycash.client.client import ReadyCashClient as ReadyCashClient

__all__ = ["Authenticator", "ReadyCashClient"]
