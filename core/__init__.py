from core.i18n_logger import get_i18n_logger

__all__ = ['get_i18n_logger']
