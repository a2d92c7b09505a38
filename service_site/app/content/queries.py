"""
WPGraphQL documents used by the site pages.
"""

STORY_FIELDS = """
    title
    slug
    date
    content
    featuredImage {
      node {
        sourceUrl
        altText
      }
    }
    storyFields {
      storyCategory
      storyAuthorName
      storyExcerpt
      storyFeatured
    }
"""

GET_FEATURED_STORY = """
query GetFeaturedStory {
  allStory(first: 1, where: { orderby: { field: DATE, order: DESC } }) {
    nodes {%s}
  }
}
""" % STORY_FIELDS

GET_RECENT_STORIES = """
query GetRecentStories {
  allStory(first: 3, where: { orderby: { field: DATE, order: DESC } }) {
    nodes {%s}
  }
}
""" % STORY_FIELDS

GET_ALL_STORIES = """
query GetAllStories {
  allStory(first: 100, where: { orderby: { field: DATE, order: DESC } }) {
    nodes {%s}
  }
}
""" % STORY_FIELDS

GET_STORY_BY_SLUG = """
query GetStoryBySlug($slug: ID!) {
  story(id: $slug, idType: SLUG) {%s}
}
""" % STORY_FIELDS

GET_ALL_EVENTS = """
query GetAllEvents {
  events(first: 20) {
    nodes {
      title
      slug
      eventFields {
        eventDate
        eventStartTime
        eventEndTime
        eventLocation
        eventDescription
      }
    }
  }
}
"""

GET_ALL_RESOURCES = """
query GetAllResources {
  resources(first: 100) {
    nodes {
      title
      slug
      resourceFields {
        resourceDescription
        resourceUrl
        resourceCategory
        resourceIcon
      }
    }
  }
}
"""

GET_TEAM_MEMBERS = """
query GetTeamMembers {
  teamMembers(first: 50) {
    nodes {
      title
      slug
      featuredImage {
        node {
          sourceUrl
          altText
        }
      }
      teamMemberFields {
        memberRole
        memberBio
      }
    }
  }
}
"""
