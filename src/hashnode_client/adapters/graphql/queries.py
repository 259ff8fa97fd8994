"""GraphQL documents for the Hashnode public API.

Post queries come in field-set tiers:

    POST_BASE_FIELDS           id, title, excerpt, slug, cover, date, read time, author
    POST_EXTENDED_FIELDS       base + tags
    POST_FULL_FIELDS           base + content
    POST_FULL_EXTENDED_FIELDS  extended + content

The extended tiers are tried first; the basic ones exist so a schema change
to ``tags`` does not take the whole blog down.
"""

POST_BASE_FIELDS = """
  id
  title
  excerpt: brief
  slug
  coverImage { url }
  publishedAt
  readTimeInMinutes
  author { name username profilePicture }
"""

POST_EXTENDED_FIELDS = f"""
  {POST_BASE_FIELDS}
  tags {{ name slug }}
"""

POST_CONTENT_FIELDS = "content { html markdown text }"

POST_FULL_FIELDS = f"""
  {POST_BASE_FIELDS}
  {POST_CONTENT_FIELDS}
"""

POST_FULL_EXTENDED_FIELDS = f"""
  {POST_EXTENDED_FIELDS}
  {POST_CONTENT_FIELDS}
"""

AUTHOR_FIELDS = "author { name username profilePicture }"

PAGE_INFO_FIELDS = "pageInfo { hasNextPage endCursor }"

SERIES_FIELDS = f"""
  id name slug coverImage createdAt
  description {{ text html markdown }}
  {AUTHOR_FIELDS}
  cuid sortOrder
"""

STATIC_PAGE_FIELDS = """
  id title slug
  content { html markdown text }
  hidden
  ogMetaData { image }
  seo { title description }
"""

WEBHOOK_FIELDS = "id url events secret createdAt updatedAt"


def get_publication() -> str:
    return f"""
      query GetPublication($host: String!) {{
        publication(host: $host) {{
          id
          title
          displayTitle
          descriptionSEO
          about {{ text }}
          url
          {AUTHOR_FIELDS}
          favicon
          ogMetaData {{ image }}
        }}
      }}
    """


def get_blog_posts(extended: bool = True) -> str:
    fields = POST_EXTENDED_FIELDS if extended else POST_BASE_FIELDS
    return f"""
      query GetBlogPosts($host: String!, $first: Int!) {{
        publication(host: $host) {{
          posts(first: $first) {{
            edges {{
              node {{
                {fields}
              }}
            }}
            {PAGE_INFO_FIELDS}
          }}
        }}
      }}
    """


def get_blog_post_by_slug(extended: bool = True) -> str:
    fields = POST_FULL_EXTENDED_FIELDS if extended else POST_FULL_FIELDS
    return f"""
      query GetBlogPost($host: String!, $slug: String!) {{
        publication(host: $host) {{
          post(slug: $slug) {{
            {fields}
          }}
        }}
      }}
    """


def search_posts() -> str:
    return f"""
      query SearchPostsOfPublication($first: Int!, $after: String, $filter: SearchPostsOfPublicationFilter!) {{
        searchPostsOfPublication(first: $first, after: $after, filter: $filter) {{
          edges {{
            node {{
              {POST_EXTENDED_FIELDS}
            }}
            cursor
          }}
          {PAGE_INFO_FIELDS}
        }}
      }}
    """


def get_series_list() -> str:
    return f"""
      query GetSeriesList($host: String!, $first: Int!, $after: String) {{
        publication(host: $host) {{
          seriesList(first: $first, after: $after) {{
            edges {{
              node {{
                {SERIES_FIELDS}
              }}
              cursor
            }}
            {PAGE_INFO_FIELDS}
            totalDocuments
          }}
        }}
      }}
    """


def get_series() -> str:
    return f"""
      query GetSeries($host: String!, $slug: String!) {{
        publication(host: $host) {{
          series(slug: $slug) {{
            {SERIES_FIELDS}
          }}
        }}
      }}
    """


def get_series_posts() -> str:
    return f"""
      query GetSeriesPosts($host: String!, $seriesSlug: String!, $first: Int!, $after: String) {{
        publication(host: $host) {{
          series(slug: $seriesSlug) {{
            posts(first: $first, after: $after) {{
              edges {{
                node {{
                  {POST_EXTENDED_FIELDS}
                }}
                cursor
              }}
              {PAGE_INFO_FIELDS}
              totalDocuments
            }}
          }}
        }}
      }}
    """


def get_static_pages() -> str:
    return f"""
      query GetStaticPages($host: String!, $first: Int!, $after: String) {{
        publication(host: $host) {{
          staticPages(first: $first, after: $after) {{
            edges {{
              node {{
                {STATIC_PAGE_FIELDS}
              }}
              cursor
            }}
            {PAGE_INFO_FIELDS}
            totalDocuments
          }}
        }}
      }}
    """


def get_static_page() -> str:
    return f"""
      query GetStaticPage($host: String!, $slug: String!) {{
        publication(host: $host) {{
          staticPage(slug: $slug) {{
            {STATIC_PAGE_FIELDS}
          }}
        }}
      }}
    """


def get_post_comments() -> str:
    return f"""
      query GetPostComments($postId: ID!, $first: Int!, $after: String) {{
        post(id: $postId) {{
          comments(first: $first, after: $after) {{
            edges {{
              node {{
                id
                content {{ html markdown text }}
                {AUTHOR_FIELDS}
                dateAdded
                totalReactions
                myTotalReactions
              }}
              cursor
            }}
            {PAGE_INFO_FIELDS}
            totalDocuments
          }}
        }}
      }}
    """


def get_recommended_publications() -> str:
    return f"""
      query GetRecommendedPublications($host: String!) {{
        publication(host: $host) {{
          recommendedPublications {{
            node {{
              id title displayTitle url
              {AUTHOR_FIELDS}
            }}
            totalFollowersGained
          }}
          totalRecommendedPublications
        }}
      }}
    """


def get_drafts() -> str:
    return f"""
      query GetDrafts($host: String!, $first: Int!, $after: String) {{
        publication(host: $host) {{
          drafts(first: $first, after: $after) {{
            edges {{
              node {{
                id slug title subtitle
                {AUTHOR_FIELDS}
                tags {{ name slug }}
                coverImage {{ url }}
                dateUpdated updatedAt
              }}
              cursor
            }}
            {PAGE_INFO_FIELDS}
            totalDocuments
          }}
        }}
      }}
    """


def create_webhook() -> str:
    return f"""
      mutation CreateWebhook($input: CreateWebhookInput!) {{
        createWebhook(input: $input) {{
          webhook {{
            {WEBHOOK_FIELDS}
            publication {{ id title }}
          }}
        }}
      }}
    """


def update_webhook() -> str:
    return f"""
      mutation UpdateWebhook($input: UpdateWebhookInput!) {{
        updateWebhook(input: $input) {{
          webhook {{
            {WEBHOOK_FIELDS}
          }}
        }}
      }}
    """


def delete_webhook() -> str:
    return """
      mutation DeleteWebhook($id: ID!) {
        deleteWebhook(id: $id) {
          webhook { id }
        }
      }
    """


def trigger_webhook_test() -> str:
    return """
      mutation TriggerWebhookTest($input: TriggerWebhookTestInput!) {
        triggerWebhookTest(input: $input) {
          webhook { id url events }
        }
      }
    """
