"""unicrn: Unistyles + Components + React Native.

Copies component and hook sources into a React Native project and keeps
their barrel index files in sync with what is on disk.
"""

__version__ = "1.0.0"
