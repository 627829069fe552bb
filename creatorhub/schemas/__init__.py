from creatorhub.schemas.article import ArticleListResponse, ArticleRead, ArticleSectionIn, ArticleSectionOut, ArticleWrite
from creatorhub.schemas.auth import AuthResponse, LoginRequest, RegisterRequest, TokenData
from creatorhub.schemas.common import MessageResponse, NotificationPreferences, OwnerSummary, Seeking, SocialLinks
from creatorhub.schemas.explore import SearchParams, SearchResponse, SearchResults
from creatorhub.schemas.featured import FeaturedContent
from creatorhub.schemas.interaction import InteractionCount, InteractionRequest, InteractionStatus, UserInteractions
from creatorhub.schemas.post import CommentCreate, PostListResponse, PostRead, PostWrite
from creatorhub.schemas.project import ProjectListResponse, ProjectRead, ProjectWrite
from creatorhub.schemas.user import UserProfile, UserUpdate

__all__ = [
	"ArticleListResponse",
	"ArticleRead",
	"ArticleSectionIn",
	"ArticleSectionOut",
	"ArticleWrite",
	"AuthResponse",
	"LoginRequest",
	"RegisterRequest",
	"TokenData",
	"MessageResponse",
	"NotificationPreferences",
	"OwnerSummary",
	"Seeking",
	"SocialLinks",
	"SearchParams",
	"SearchResponse",
	"SearchResults",
	"FeaturedContent",
	"InteractionCount",
	"InteractionRequest",
	"InteractionStatus",
	"UserInteractions",
	"CommentCreate",
	"PostListResponse",
	"PostRead",
	"PostWrite",
	"ProjectListResponse",
	"ProjectRead",
	"ProjectWrite",
	"UserProfile",
	"UserUpdate",
]
