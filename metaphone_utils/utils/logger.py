import logging
import sys
import os
from logging.handlers import RotatingFileHandler
from datetime import datetime
from typing import Optional

_LOGGER_NAME = "metaphone_utils"
_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
_MAX_LINES = 5000
_BACKUP_COUNT = 20

class LineRotatingFileHandler(RotatingFileHandler):
	"""
	Rotates log after a maximum number of lines, not bytes.
	"""
	def __init__(self, filename, maxLines, backupCount=0, encoding=None):
		super().__init__(filename, maxBytes=0, backupCount=backupCount, encoding=encoding)
		self.maxLines = maxLines
		self.lineCount = 0
		self._count_existing_lines()

	def _count_existing_lines(self):
		try:
			with open(self.baseFilename, 'r', encoding=self.encoding or 'utf-8') as f:
				self.lineCount = sum(1 for _ in f)
		except FileNotFoundError:
			self.lineCount = 0

	def emit(self, record):
		super().emit(record)
		self.lineCount += 1
		if self.lineCount >= self.maxLines:
			self.doRollover()
			self.lineCount = 0

def setup_logger(log_dir: Optional[str] = None, level: int = logging.INFO):
	"""
	Set up the project logger. Console output goes to stderr so encoded
	names written to stdout stay machine readable.
	When log_dir is given, also log to a timestamped file there that
	rotates after 5000 lines and keeps the last 20 logs.
	Call this once at program startup.
	"""
	logger = logging.getLogger(_LOGGER_NAME)
	logger.setLevel(level)
	if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
			   for h in logger.handlers):
		ch = logging.StreamHandler(sys.stderr)
		ch.setFormatter(logging.Formatter(_LOG_FORMAT))
		logger.addHandler(ch)

	if log_dir and not any(isinstance(h, LineRotatingFileHandler) for h in logger.handlers):
		os.makedirs(log_dir, exist_ok=True)
		log_file = os.path.join(log_dir, f"metaphone_utils_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log")
		fh = LineRotatingFileHandler(log_file, maxLines=_MAX_LINES, backupCount=_BACKUP_COUNT, encoding="utf-8")
		fh.setFormatter(logging.Formatter(_LOG_FORMAT))
		logger.addHandler(fh)
	return logger

def get_logger(name: Optional[str] = None):
	"""
	Get the shared project logger, or a child of it when name is given.
	"""
	if name:
		return logging.getLogger(f"{_LOGGER_NAME}.{name}")
	return logging.getLogger(_LOGGER_NAME)
