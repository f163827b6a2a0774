"""Central re-exports for package-local Protocols.

The canonical definitions live beside their implementations in each
package.
"""

from hr_lib.storage.interfaces import StorageProtocol
from hr_lib.candidates.interfaces import CandidateServiceProtocol

__all__ = [
    "StorageProtocol",
    "CandidateServiceProtocol",
]
