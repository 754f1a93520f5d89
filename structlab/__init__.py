"""Classic data structures and recursive algorithms: arrays, lists, hash tables, trees and more."""

__version__ = "0.1.0"