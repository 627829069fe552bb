from creatorhub.models.article import Article, ArticleSection
from creatorhub.models.interaction import Follow, Like, Watch
from creatorhub.models.post import Post, PostComment
from creatorhub.models.project import Project
from creatorhub.models.user import User
from creatorhub.models.user_collections import (
	UserAccolade,
	UserCaseStudy,
	UserCertification,
	UserEducation,
	UserEndorsement,
	UserFeaturedProject,
	UserWorkExperience,
)

__all__ = [
	"Article",
	"ArticleSection",
	"Follow",
	"Like",
	"Watch",
	"Post",
	"PostComment",
	"Project",
	"User",
	"UserAccolade",
	"UserCaseStudy",
	"UserCertification",
	"UserEducation",
	"UserEndorsement",
	"UserFeaturedProject",
	"UserWorkExperience",
]
