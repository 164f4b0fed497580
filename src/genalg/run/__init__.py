from genalg.run.config import Config

__all__ = ['Config']
