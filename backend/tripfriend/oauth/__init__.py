"""
OAuth identity adapters
"""

from tripfriend.oauth.user_info import GoogleUserInfo, OAuth2UserInfo, get_oauth2_user_info

__all__ = ["GoogleUserInfo", "OAuth2UserInfo", "get_oauth2_user_info"]
