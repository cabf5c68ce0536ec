DISCUSSION_COMMENTS_QUERY = """
query DiscussionComments(
  $organization: String!
  $repository: String!
  $discussionNumber: Int!
  $first: Int!
  $after: String
) {
  repository(owner: $organization, name: $repository) {
    discussion(number: $discussionNumber) {
      comments(first: $first, after: $after) {
        pageInfo {
          endCursor
          hasNextPage
        }
        nodes {
          author {
            login
          }
          bodyHTML
        }
      }
    }
  }
}
"""

REPOSITORY_STATS_QUERY = """
query RepositoryStats($owner: String!, $name: String!) {
  repository(owner: $owner, name: $name) {
    name
    description
    url
    stargazerCount
    forkCount
    owner {
      login
      avatarUrl
    }
    issues(states: OPEN) {
      totalCount
    }
    pullRequests(states: OPEN) {
      totalCount
    }
    discussions {
      totalCount
    }
    mentionableUsers {
      totalCount
    }
  }
}
"""
