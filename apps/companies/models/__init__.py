from .company import Company
from .invitation_code import InvitationCode
from .membership import CompanyMembership

__all__ = ["Company", "CompanyMembership", "InvitationCode"]
