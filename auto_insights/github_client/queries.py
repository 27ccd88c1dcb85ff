"""GraphQL documents for the GitHub Projects (v2) API."""

PROJECT_ID_QUERY = """
query project($login: String!, $number: Int!) {
  organization(login: $login) {
    projectV2(number: $number) {
      id
    }
  }
}
"""

PROJECT_ITEMS_QUERY = """
query projectItems($id: ID!, $first: Int!, $after: String) {
  node(id: $id) {
    ... on ProjectV2 {
      items(
        first: $first
        orderBy: {direction: DESC, field: POSITION}
        after: $after
      ) {
        pageInfo {
          endCursor
          hasNextPage
        }
        nodes {
          fieldValues(first: 20) {
            nodes {
              __typename
              ... on ProjectV2ItemFieldIterationValue {
                title
                startDate
                duration
                field {
                  ... on ProjectV2FieldCommon {
                    name
                  }
                }
              }
              ... on ProjectV2ItemFieldSingleSelectValue {
                name
                field {
                  ... on ProjectV2FieldCommon {
                    name
                  }
                }
              }
              ... on ProjectV2ItemFieldPullRequestValue {
                pullRequests(first: 20) {
                  nodes {
                    id
                  }
                }
                field {
                  ... on ProjectV2FieldCommon {
                    name
                  }
                }
              }
            }
          }
          content {
            __typename
            ... on Issue {
              title
              number
              state
              repository {
                name
                owner {
                  login
                }
              }
            }
            ... on PullRequest {
              id
              title
              number
              state
              repository {
                name
                owner {
                  login
                }
              }
            }
            ... on DraftIssue {
              title
            }
          }
        }
      }
    }
  }
}
"""
