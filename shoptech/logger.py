"""
Store Logger
============

Core Design: Small logging framework used by every store component.

Design Patterns & Strategies Used:
1. Strategy Pattern - Log formatting strategies (Simple, JSON)
2. Observer Pattern - Multiple appenders per logger
3. Factory Pattern - One logger per name via LoggerFactory

Loggers start without appenders, so library code stays silent until an
application calls configure_logging() or attaches an appender itself.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Dict, Optional
from datetime import datetime
from threading import Lock
import json


class LogLevel(Enum):
    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4
    
    @classmethod
    def from_name(cls, name: str) -> 'LogLevel':
        """Resolve a level from its (case-insensitive) name"""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown log level: {name}") from None


# ==================== STRATEGY PATTERN ====================
# Different formatting strategies

class FormatterStrategy(ABC):
    """Formatter strategy interface"""
    
    @abstractmethod
    def format(self, name: str, level: LogLevel, message: str, timestamp: datetime) -> str:
        pass


class SimpleFormatter(FormatterStrategy):
    """Simple formatter"""
    
    def format(self, name: str, level: LogLevel, message: str, timestamp: datetime) -> str:
        return f"{timestamp.isoformat(timespec='seconds')} [{level.name}] {name}: {message}"


class JSONFormatter(FormatterStrategy):
    """JSON formatter"""
    
    def format(self, name: str, level: LogLevel, message: str, timestamp: datetime) -> str:
        return json.dumps({
            "timestamp": timestamp.isoformat(),
            "logger": name,
            "level": level.name,
            "message": message
        })


# ==================== OBSERVER PATTERN ====================
# Multiple log appenders/sinks

class LogAppender(ABC):
    """Appender interface (Observer)"""
    
    def __init__(self, formatter: Optional[FormatterStrategy] = None):
        self.formatter = formatter or SimpleFormatter()
    
    @abstractmethod
    def append(self, name: str, level: LogLevel, message: str, timestamp: datetime):
        pass


class ConsoleAppender(LogAppender):
    """Console appender"""
    
    def append(self, name: str, level: LogLevel, message: str, timestamp: datetime):
        print(self.formatter.format(name, level, message, timestamp))


class MemoryAppender(LogAppender):
    """Keeps formatted records in memory (handy for tests and demos)"""
    
    def __init__(self, formatter: Optional[FormatterStrategy] = None):
        super().__init__(formatter)
        self.records: List[str] = []
    
    def append(self, name: str, level: LogLevel, message: str, timestamp: datetime):
        self.records.append(self.formatter.format(name, level, message, timestamp))
    
    def clear(self):
        self.records.clear()


class Logger:
    """Named logger with level filtering"""
    
    def __init__(self, name: str, level: LogLevel = LogLevel.INFO):
        self.name = name
        self.level = level
        self.appenders: List[LogAppender] = []
        self.lock = Lock()
    
    def add_appender(self, appender: LogAppender):
        with self.lock:
            self.appenders.append(appender)
    
    def remove_appender(self, appender: LogAppender):
        with self.lock:
            if appender in self.appenders:
                self.appenders.remove(appender)
    
    def set_level(self, level: LogLevel):
        self.level = level
    
    def log(self, level: LogLevel, message: str):
        if level.value < self.level.value:
            return
        
        timestamp = datetime.now()
        
        with self.lock:
            for appender in self.appenders:
                appender.append(self.name, level, message, timestamp)
    
    def debug(self, message: str):
        self.log(LogLevel.DEBUG, message)
    
    def info(self, message: str):
        self.log(LogLevel.INFO, message)
    
    def warn(self, message: str):
        self.log(LogLevel.WARN, message)
    
    def error(self, message: str):
        self.log(LogLevel.ERROR, message)
    
    def fatal(self, message: str):
        self.log(LogLevel.FATAL, message)


class LoggerFactory:
    """Factory for creating loggers"""
    
    _loggers: Dict[str, Logger] = {}
    _lock = Lock()
    
    @staticmethod
    def get_logger(name: str, level: LogLevel = LogLevel.INFO) -> Logger:
        """Get or create logger (Singleton per name)"""
        with LoggerFactory._lock:
            if name not in LoggerFactory._loggers:
                LoggerFactory._loggers[name] = Logger(name, level)
            return LoggerFactory._loggers[name]
    
    @staticmethod
    def get_all_loggers() -> List[Logger]:
        with LoggerFactory._lock:
            return list(LoggerFactory._loggers.values())


def configure_logging(level: LogLevel = LogLevel.INFO,
                      appender: Optional[LogAppender] = None) -> LogAppender:
    """Attach one appender to every store logger and set their level.
    
    Loggers created afterwards are not affected; store modules create
    theirs at import time, so call this after importing the package.
    """
    appender = appender or ConsoleAppender()
    for logger in LoggerFactory.get_all_loggers():
        logger.set_level(level)
        logger.add_appender(appender)
    return appender
